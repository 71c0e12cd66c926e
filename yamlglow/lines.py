"""Classification of single YAML lines."""

from __future__ import annotations

from dataclasses import dataclass

CHOMPING_INDICATORS = (">", ">-", ">+", "|", "|-", "|+")

_INT64_MAX = 2**63 - 1
_INT64_DIGITS = len(str(_INT64_MAX))
_NUMBER_NOISE = str.maketrans("", "", ".-T+:'")
_DIGITS = frozenset("0123456789")


@dataclass
class YamlLine:
    """One line of YAML text plus the key and value found in it."""

    raw: str = ""
    key: str = ""
    value: str = ""

    def is_key_value(self) -> bool:
        """Tell whether the line is a ``key: value`` pair, storing key and value if so."""
        raw = self.raw
        if "://" in raw and ":" not in raw.replace("://", ""):
            return False
        if ":" not in raw:
            return False

        parts = raw.split(":")
        first, last = parts[1], parts[-1]
        if first.startswith(" ") or not first:
            self.key = parts[0]
            self.value = ":".join(parts[1:]).strip()
            return True
        if len(parts) > 2 and (last.startswith(" ") or not last):
            self.key = ":".join(parts[:-1])
            self.value = last.strip()
            return True
        return False

    def is_comment(self) -> bool:
        """Tell whether the first non-blank character is ``#``."""
        return self.raw.strip().startswith("#")

    def value_is_boolean(self) -> bool:
        """Tell whether the value reads as true or false, in any case."""
        return self.value.lower() in ("true", "false")

    def value_is_number_or_ip(self) -> bool:
        """Tell whether the value is a number, an IP address or a timestamp."""
        digits = self.value.translate(_NUMBER_NOISE)
        return (
            bool(digits)
            and all(ch in _DIGITS for ch in digits)
            and len(digits.lstrip("0")) <= _INT64_DIGITS
            and int(digits) <= _INT64_MAX
        )

    def is_empty_line(self) -> bool:
        """Tell whether the line holds only whitespace."""
        return not self.raw.strip()

    def is_element_of_list(self) -> bool:
        """Tell whether the first non-blank character is ``-``."""
        return self.raw.strip().startswith("-")

    def is_url(self) -> bool:
        """Tell whether the line holds a ``scheme://`` separator."""
        return "://" in self.raw

    def indentation_spaces(self) -> int:
        """Count the spaces that open the line."""
        return len(self.raw) - len(self.raw.lstrip(" "))

    def value_contains_chomping_indicator(self) -> bool:
        """Tell whether the value announces a block scalar on the following lines."""
        return any(indicator in self.value for indicator in CHOMPING_INDICATORS)