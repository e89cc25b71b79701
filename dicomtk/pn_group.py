"""Person Name (PN) value groups.

A PN value holds up to three groups (Alphabetic, Ideographic, Phonetic), each
made of up to five '^'-separated segments:
family name, given name, middle name, name prefix and name suffix.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Sequence, Union

SEGMENT_SEP = "^"
GROUP_SEP = "="

_SPEC_HINT = "see 'PN' entry in the DICOM standard, part 5, section 6.2"


class PersonNameError(ValueError):
    """Raised when a PN value cannot be parsed."""

    base_message = "error parsing PN value"

    def __init__(self, detail: str = "") -> None:
        message = f"{self.base_message}: {detail}" if detail else self.base_message
        super().__init__(message)


class GroupCountError(PersonNameError):
    """Raised when a PN value holds more than three groups."""

    def __init__(self, groups_found: int) -> None:
        self.groups_found = groups_found
        super().__init__(
            "no more than 3 groups with "
            f"'[Alphabetic]{GROUP_SEP}[Ideographic]{GROUP_SEP}[Phonetic]' "
            f"format are allowed: value contains {groups_found} groups. {_SPEC_HINT}"
        )


class GroupSegmentCountError(PersonNameError):
    """Raised when a PN group holds more than five segments."""

    def __init__(self, group: "PNGroup", segments_found: int) -> None:
        self.group = group
        self.segments_found = segments_found
        sep = SEGMENT_SEP
        super().__init__(
            "no more than 5 segments with "
            f"'[Last]{sep}[First]{sep}[Middle]{sep}[Prefix]{sep}[Suffix]' "
            f"format are allowed: value group {group} contains "
            f"{segments_found} segments. {_SPEC_HINT}"
        )


class NullSepLevelError(ValueError):
    """Raised when a trailing null level exceeds its maximum."""

    def __init__(self, max_allowed: int, found: int) -> None:
        self.max_allowed = max_allowed
        self.found = found
        super().__init__(
            "TrailingNullLevel exceeded maximum: "
            f"cannot be greater than {max_allowed}, got {found}"
        )


class PNGroup(IntEnum):
    """The three groups of a PN value."""

    ALPHABETIC = 0
    IDEOGRAPHIC = 1
    PHONETIC = 2

    def __str__(self) -> str:
        return self.name.capitalize()


class GroupTrailingNullLevel(IntEnum):
    """Highest null '^' separator rendered by GroupInfo.dcm()."""

    NONE = 0
    GIVEN = 1
    MIDDLE = 2
    PREFIX = 3
    ALL = 4

    def __str__(self) -> str:
        return _GROUP_LEVEL_NAMES[self]


_GROUP_LEVEL_NAMES = {
    GroupTrailingNullLevel.NONE: "NONE",
    GroupTrailingNullLevel.GIVEN: "GivenName",
    GroupTrailingNullLevel.MIDDLE: "MiddleName",
    GroupTrailingNullLevel.PREFIX: "NamePrefix",
    GroupTrailingNullLevel.ALL: "ALL",
}


def render_with_seps(
    sections: Sequence[str], separator: str, null_sep_level: int
) -> str:
    """Join sections, keeping separators up to null_sep_level even when empty.

    Separators before any non-empty section are always kept.
    """
    parts: list[str] = []
    non_zero_found = False
    for i in range(len(sections) - 1, -1, -1):
        section = sections[i]
        parts.append(section)
        if section:
            non_zero_found = True
        if i > 0 and (non_zero_found or i <= null_sep_level):
            parts.append(separator)
    return "".join(reversed(parts))


@dataclass(frozen=True)
class GroupInfo:
    """One parsed PN group (Alphabetic, Ideographic or Phonetic)."""

    family_name: str = ""
    given_name: str = ""
    middle_name: str = ""
    name_prefix: str = ""
    name_suffix: str = ""
    trailing_null_level: Union[GroupTrailingNullLevel, int] = GroupTrailingNullLevel.NONE

    def __post_init__(self) -> None:
        level = int(self.trailing_null_level)
        if 0 <= level <= GroupTrailingNullLevel.ALL:
            object.__setattr__(
                self, "trailing_null_level", GroupTrailingNullLevel(level)
            )

    @property
    def segments(self) -> tuple[str, str, str, str, str]:
        return (
            self.family_name,
            self.given_name,
            self.middle_name,
            self.name_prefix,
            self.name_suffix,
        )

    def dcm(self) -> str:
        """Render as '[Family]^[Given]^[Middle]^[Prefix]^[Suffix]'."""
        level = int(self.trailing_null_level)
        if level > GroupTrailingNullLevel.ALL or level < 0:
            raise NullSepLevelError(int(GroupTrailingNullLevel.ALL), level)
        return render_with_seps(self.segments, SEGMENT_SEP, level)

    def is_empty(self) -> bool:
        """True if every segment is empty, whatever the separators."""
        return not any(self.segments)


def parse_group(
    group_string: str, group: PNGroup = PNGroup.ALPHABETIC
) -> GroupInfo:
    """Parse one '^'-separated PN group string."""
    segments = group_string.split(SEGMENT_SEP)
    if len(segments) > 5:
        raise GroupSegmentCountError(PNGroup(group), len(segments))

    null_level = GroupTrailingNullLevel.NONE
    for i, value in enumerate(segments):
        null_level = (
            GroupTrailingNullLevel(i) if value == "" else GroupTrailingNullLevel.NONE
        )

    padded = segments + [""] * (5 - len(segments))
    trailing = (
        null_level if group_string.endswith(SEGMENT_SEP) else GroupTrailingNullLevel.NONE
    )
    return GroupInfo(*padded, trailing_null_level=trailing)