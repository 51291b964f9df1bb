import attrs


def _validate_non_empty_string(instance: object, attribute: attrs.Attribute, value: str) -> None:
    if not value or not value.strip():
        raise ValueError(f'Movie {attribute.name} cannot be empty')


def _validate_positive(instance: object, attribute: attrs.Attribute, value: int) -> None:
    if value <= 0:
        raise ValueError(f'Movie {attribute.name} must be positive')


@attrs.frozen
class Movie:
    title: str = attrs.field(validator=_validate_non_empty_string)
    genre: str = attrs.field(validator=_validate_non_empty_string)
    duration_minutes: int = attrs.field(validator=_validate_positive)
