from enum import StrEnum, auto

from pydantic import BaseModel


class CodeTrimMode(StrEnum):
    REFERENCE = auto()  # trailing spaces plus one more character
    TRAILING_WHITESPACE = auto()  # str.rstrip()


class SublistPlacement(StrEnum):
    SIBLING = auto()  # nested list follows its item in the enclosing list
    NESTED = auto()  # nested list goes in the preceding item's children


class TransformConfig(BaseModel):
    code_trim: CodeTrimMode = CodeTrimMode.REFERENCE
    sublist_placement: SublistPlacement = SublistPlacement.SIBLING
    strict: bool = False  # raise on the first unrepresentable node
