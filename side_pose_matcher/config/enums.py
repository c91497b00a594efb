from enum import Enum


class Alliance(Enum):
    """
    Side of the field a robot plays for. UNKNOWN until match control reports it.
    """

    BLUE = "blue"
    RED = "red"
    UNKNOWN = "unknown"

    @classmethod
    def from_value(cls, value) -> "Alliance":
        """Coerce an Alliance, a case-insensitive string or None (unreported) to an Alliance."""
        if value is None:
            return cls.UNKNOWN
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return alliance_str_to_enum[value.strip().lower()]
            except KeyError:
                valid = list(alliance_str_to_enum)
                raise ValueError(f"Invalid alliance: {value!r}. Expected one of {valid}") from None
        raise ValueError(f"Cannot interpret {type(value).__name__} as an alliance")


alliance_str_to_enum = {a.value: a for a in Alliance}
