"""Person Name (PN) values made of Alphabetic, Ideographic and Phonetic groups."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import IntEnum
from typing import Union

from dicomtk.pn_group import (
    GROUP_SEP,
    GroupCountError,
    GroupInfo,
    GroupTrailingNullLevel,
    NullSepLevelError,
    PNGroup,
    parse_group,
    render_with_seps,
)

__all__ = ["InfoTrailingNullLevel", "Info", "parse"]


class InfoTrailingNullLevel(IntEnum):
    """Highest null '=' separator rendered by Info.dcm()."""

    NONE = 0
    IDEOGRAPHIC = 1
    ALL = 2

    def __str__(self) -> str:
        return _INFO_LEVEL_NAMES[self]


_INFO_LEVEL_NAMES = {
    InfoTrailingNullLevel.NONE: "NONE",
    InfoTrailingNullLevel.IDEOGRAPHIC: "Ideographic",
    InfoTrailingNullLevel.ALL: "ALL",
}


@dataclass(frozen=True)
class Info:
    """A parsed PN value: '[Alphabetic]=[Ideographic]=[Phonetic]'."""

    alphabetic: GroupInfo = field(default_factory=GroupInfo)
    ideographic: GroupInfo = field(default_factory=GroupInfo)
    phonetic: GroupInfo = field(default_factory=GroupInfo)
    trailing_null_level: Union[InfoTrailingNullLevel, int] = InfoTrailingNullLevel.NONE

    def __post_init__(self) -> None:
        level = int(self.trailing_null_level)
        if 0 <= level <= InfoTrailingNullLevel.ALL:
            object.__setattr__(
                self, "trailing_null_level", InfoTrailingNullLevel(level)
            )

    @property
    def groups(self) -> tuple[GroupInfo, GroupInfo, GroupInfo]:
        return (self.alphabetic, self.ideographic, self.phonetic)

    def with_format(
        self,
        info_level: Union[InfoTrailingNullLevel, int],
        alphabetic_level: Union[GroupTrailingNullLevel, int],
        ideographic_level: Union[GroupTrailingNullLevel, int],
        phonetic_level: Union[GroupTrailingNullLevel, int],
    ) -> "Info":
        """Return a copy with the given trailing null levels applied."""
        return Info(
            alphabetic=replace(self.alphabetic, trailing_null_level=alphabetic_level),
            ideographic=replace(
                self.ideographic, trailing_null_level=ideographic_level
            ),
            phonetic=replace(self.phonetic, trailing_null_level=phonetic_level),
            trailing_null_level=info_level,
        )

    def with_trailing_nulls(self) -> "Info":
        """Return a copy that renders every trailing separator."""
        return self.with_format(
            InfoTrailingNullLevel.ALL,
            GroupTrailingNullLevel.ALL,
            GroupTrailingNullLevel.ALL,
            GroupTrailingNullLevel.ALL,
        )

    def without_trailing_nulls(self) -> "Info":
        """Return a copy that renders no trailing separators."""
        return self.with_format(
            InfoTrailingNullLevel.NONE,
            GroupTrailingNullLevel.NONE,
            GroupTrailingNullLevel.NONE,
            GroupTrailingNullLevel.NONE,
        )

    def without_empty_groups(self) -> "Info":
        """Drop group separators and trailing nulls of groups holding no data."""

        def strip(group: GroupInfo) -> GroupInfo:
            if group.is_empty():
                return replace(group, trailing_null_level=GroupTrailingNullLevel.NONE)
            return group

        return Info(
            alphabetic=strip(self.alphabetic),
            ideographic=strip(self.ideographic),
            phonetic=strip(self.phonetic),
            trailing_null_level=InfoTrailingNullLevel.NONE,
        )

    def dcm(self) -> str:
        """Render as '[Alphabetic]=[Ideographic]=[Phonetic]'."""
        level = int(self.trailing_null_level)
        if level < 0 or level > InfoTrailingNullLevel.ALL:
            raise NullSepLevelError(int(InfoTrailingNullLevel.ALL), level)

        rendered = []
        for pn_group, group in zip(PNGroup, self.groups):
            try:
                rendered.append(group.dcm())
            except NullSepLevelError as err:
                raise ValueError(f"error formatting group {pn_group}: {err}") from err
        return render_with_seps(rendered, GROUP_SEP, level)

    def is_empty(self) -> bool:
        """True if no group holds any name data, whatever the separators."""
        return all(group.is_empty() for group in self.groups)

    def __str__(self) -> str:
        return self.dcm()


def parse(value: str) -> Info:
    """Parse a PN value string into an Info."""
    group_strings = value.split(GROUP_SEP)
    if len(group_strings) > 3:
        raise GroupCountError(len(group_strings))

    null_level = InfoTrailingNullLevel.NONE
    parsed: dict[PNGroup, GroupInfo] = {}
    for pn_group, group_string in zip(PNGroup, group_strings):
        null_level = (
            InfoTrailingNullLevel(int(pn_group))
            if group_string == ""
            else InfoTrailingNullLevel.NONE
        )
        parsed[pn_group] = parse_group(group_string, pn_group)

    return Info(
        alphabetic=parsed.get(PNGroup.ALPHABETIC, GroupInfo()),
        ideographic=parsed.get(PNGroup.IDEOGRAPHIC, GroupInfo()),
        phonetic=parsed.get(PNGroup.PHONETIC, GroupInfo()),
        trailing_null_level=null_level,
    )