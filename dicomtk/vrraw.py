"""Two-letter Value Representation (VR) codes, including deprecated ones."""

from __future__ import annotations

from enum import Enum

__all__ = ["VR"]


class VR(str, Enum):
    """DICOM Value Representations."""

    APPLICATION_ENTITY = "AE"
    AGE_STRING = "AS"
    ATTRIBUTE_TAG = "AT"
    CODE_STRING = "CS"
    DATE = "DA"
    DECIMAL_STRING = "DS"
    DATE_TIME = "DT"
    FLOATING_POINT_SINGLE = "FL"
    FLOATING_POINT_DOUBLE = "FD"
    INTEGER_STRING = "IS"
    LONG_STRING = "LO"
    LONG_TEXT = "LT"
    OTHER_BYTE = "OB"
    OTHER_DOUBLE = "OD"
    OTHER_FLOAT = "OF"
    OTHER_LONG = "OL"
    OTHER_VERY_LONG = "OV"
    OTHER_WORD = "OW"
    PERSON_NAME = "PN"
    SHORT_STRING = "SH"
    SIGNED_LONG = "SL"
    SEQUENCE = "SQ"
    SIGNED_SHORT = "SS"
    SHORT_TEXT = "ST"
    SIGNED_VERY_LONG = "SV"
    TIME = "TM"
    UNLIMITED_CHARACTERS = "UC"
    UNIQUE_IDENTIFIER = "UI"
    UNSIGNED_LONG = "UL"
    UNKNOWN = "UN"
    UNIVERSAL_RESOURCE_IDENTIFIER = "UR"
    UNSIGNED_SHORT = "US"
    UNLIMITED_TEXT = "UT"
    UNSIGNED_VERY_LONG = "UV"

    def __str__(self) -> str:
        return self.value