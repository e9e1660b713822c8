"""Domain models describing a compiled numbering plan."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

NOT_APPLICABLE = "NA"


@dataclass(frozen=True, slots=True)
class PhoneNumberDesc:
    """Patterns and example for one category of numbers in a region.

    ``NOT_APPLICABLE`` in a pattern means the region has no numbers of this
    category. It is not the same as an empty pattern.
    """

    possible_number_pattern: str = NOT_APPLICABLE
    national_number_pattern: str = NOT_APPLICABLE
    example_number: str = NOT_APPLICABLE

    @property
    def has_numbers(self) -> bool:
        return self.national_number_pattern != NOT_APPLICABLE


@dataclass(frozen=True, slots=True)
class NumberFormat:
    """A single formatting rule for a region."""

    format: str
    pattern: str = ""
    leading_digits_patterns: tuple[str, ...] = ()
    national_prefix_formatting_rule: str = ""
    domestic_carrier_code_formatting_rule: str = ""
    national_prefix_optional_when_formatting: bool = False


@dataclass(slots=True)
class NumberFormatBuilder:
    """Mutable staging area for a :class:`NumberFormat`."""

    format: Optional[str] = None
    pattern: str = ""
    leading_digits_patterns: list[str] = field(default_factory=list)
    national_prefix_formatting_rule: str = ""
    domestic_carrier_code_formatting_rule: str = ""
    national_prefix_optional_when_formatting: bool = False

    def build(self) -> NumberFormat:
        if self.format is None:
            raise ValueError("NumberFormat requires a national format template")
        return NumberFormat(
            format=self.format,
            pattern=self.pattern,
            leading_digits_patterns=tuple(self.leading_digits_patterns),
            national_prefix_formatting_rule=self.national_prefix_formatting_rule,
            domestic_carrier_code_formatting_rule=self.domestic_carrier_code_formatting_rule,
            national_prefix_optional_when_formatting=self.national_prefix_optional_when_formatting,
        )


NUMBER_TYPE_FIELDS: dict[str, str] = {
    "fixedLine": "fixed_line",
    "mobile": "mobile",
    "pager": "pager",
    "tollFree": "toll_free",
    "premiumRate": "premium_rate",
    "sharedCost": "shared_cost",
    "personalNumber": "personal_number",
    "voip": "voip",
    "uan": "uan",
    "shortCode": "short_code",
}


@dataclass(frozen=True, slots=True)
class PhoneMetadata:
    """Compiled, read-only metadata for one region."""

    id: str
    country_code: int
    international_prefix: str
    general_desc: PhoneNumberDesc
    fixed_line: PhoneNumberDesc
    mobile: PhoneNumberDesc
    pager: PhoneNumberDesc
    toll_free: PhoneNumberDesc
    premium_rate: PhoneNumberDesc
    shared_cost: PhoneNumberDesc
    personal_number: PhoneNumberDesc
    voip: PhoneNumberDesc
    uan: PhoneNumberDesc
    short_code: PhoneNumberDesc
    emergency: PhoneNumberDesc
    leading_digits: str = ""
    preferred_international_prefix: str = ""
    national_prefix: str = ""
    national_prefix_for_parsing: str = ""
    national_prefix_transform_rule: str = ""
    preferred_extn_prefix: str = ""
    national_prefix_formatting_rule: str = ""
    domestic_carrier_code_formatting_rule: str = ""
    same_mobile_and_fixed_line_pattern: bool = False
    main_country_for_code: bool = False
    leading_zero_possible: bool = False
    number_format: tuple[NumberFormat, ...] = ()
    intl_number_format: tuple[NumberFormat, ...] = ()

    def number_desc(self, number_type: str) -> PhoneNumberDesc:
        """Return the descriptor for a category tag such as ``tollFree``."""

        try:
            return getattr(self, NUMBER_TYPE_FIELDS[number_type])
        except KeyError:
            raise ValueError(f"Unknown number type: {number_type}") from None


@dataclass(slots=True)
class PhoneMetadataBuilder:
    """Mutable staging area filled in by the compiler for one territory.

    A builder belongs to a single compile call and is never shared before
    :meth:`build` freezes it.
    """

    id: str = ""
    country_code: Optional[int] = None
    leading_digits: str = ""
    international_prefix: str = ""
    preferred_international_prefix: str = ""
    national_prefix: str = ""
    national_prefix_for_parsing: str = ""
    national_prefix_transform_rule: str = ""
    preferred_extn_prefix: str = ""
    national_prefix_formatting_rule: str = ""
    domestic_carrier_code_formatting_rule: str = ""
    general_desc: PhoneNumberDesc = field(default_factory=PhoneNumberDesc)
    fixed_line: PhoneNumberDesc = field(default_factory=PhoneNumberDesc)
    mobile: PhoneNumberDesc = field(default_factory=PhoneNumberDesc)
    pager: PhoneNumberDesc = field(default_factory=PhoneNumberDesc)
    toll_free: PhoneNumberDesc = field(default_factory=PhoneNumberDesc)
    premium_rate: PhoneNumberDesc = field(default_factory=PhoneNumberDesc)
    shared_cost: PhoneNumberDesc = field(default_factory=PhoneNumberDesc)
    personal_number: PhoneNumberDesc = field(default_factory=PhoneNumberDesc)
    voip: PhoneNumberDesc = field(default_factory=PhoneNumberDesc)
    uan: PhoneNumberDesc = field(default_factory=PhoneNumberDesc)
    short_code: PhoneNumberDesc = field(default_factory=PhoneNumberDesc)
    emergency: PhoneNumberDesc = field(default_factory=PhoneNumberDesc)
    same_mobile_and_fixed_line_pattern: bool = False
    main_country_for_code: bool = False
    leading_zero_possible: bool = False
    number_format: list[NumberFormat] = field(default_factory=list)
    intl_number_format: list[NumberFormat] = field(default_factory=list)

    def set_number_desc(self, number_type: str, desc: PhoneNumberDesc) -> None:
        setattr(self, NUMBER_TYPE_FIELDS[number_type], desc)

    def build(self) -> PhoneMetadata:
        """Freeze the staged values into a :class:`PhoneMetadata`."""

        if self.country_code is None:
            raise ValueError("PhoneMetadata requires a country code")
        return PhoneMetadata(
            id=self.id,
            country_code=self.country_code,
            international_prefix=self.international_prefix,
            general_desc=self.general_desc,
            fixed_line=self.fixed_line,
            mobile=self.mobile,
            pager=self.pager,
            toll_free=self.toll_free,
            premium_rate=self.premium_rate,
            shared_cost=self.shared_cost,
            personal_number=self.personal_number,
            voip=self.voip,
            uan=self.uan,
            short_code=self.short_code,
            emergency=self.emergency,
            leading_digits=self.leading_digits,
            preferred_international_prefix=self.preferred_international_prefix,
            national_prefix=self.national_prefix,
            national_prefix_for_parsing=self.national_prefix_for_parsing,
            national_prefix_transform_rule=self.national_prefix_transform_rule,
            preferred_extn_prefix=self.preferred_extn_prefix,
            national_prefix_formatting_rule=self.national_prefix_formatting_rule,
            domestic_carrier_code_formatting_rule=self.domestic_carrier_code_formatting_rule,
            same_mobile_and_fixed_line_pattern=self.same_mobile_and_fixed_line_pattern,
            main_country_for_code=self.main_country_for_code,
            leading_zero_possible=self.leading_zero_possible,
            number_format=tuple(self.number_format),
            intl_number_format=tuple(self.intl_number_format),
        )


__all__ = [
    "NOT_APPLICABLE",
    "NUMBER_TYPE_FIELDS",
    "NumberFormat",
    "NumberFormatBuilder",
    "PhoneMetadata",
    "PhoneMetadataBuilder",
    "PhoneNumberDesc",
]
