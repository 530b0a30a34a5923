"""Exceptions raised while deriving and transforming assets."""

from pathlib import Path


class AssetError(Exception):
    """Base exception for all asset pipeline errors."""

    def __init__(self, message: str, *args, **kwargs):
        self.message = message
        super().__init__(message, *args, **kwargs)


class CatalogError(AssetError):
    """Raised when the upstream catalog is malformed or incomplete."""

    pass


class NonInjectiveMappingError(CatalogError):
    """Raised when a lookup table cannot be inverted without losing keys."""

    def __init__(self, value: str, first_key: str, second_key: str):
        self.value = value
        self.first_key = first_key
        self.second_key = second_key
        super().__init__(
            f"Cannot invert mapping: {first_key!r} and {second_key!r} "
            f"both map to {value!r}"
        )


class InvalidExpansionError(AssetError):
    """Raised when an item belongs to an expansion marked invalid."""

    def __init__(self, item_id: int, expansion_code: str):
        self.item_id = item_id
        self.expansion_code = expansion_code
        super().__init__(
            f"Item {item_id} references invalid expansion {expansion_code!r}"
        )


class ResolutionConflict(AssetError):
    """Raised when two items resolve to one identity with different URLs."""

    def __init__(
        self,
        identity: str,
        existing_url: str,
        new_url: str,
        existing_item_id: int | None,
        item_id: int,
    ):
        self.identity = identity
        self.existing_url = existing_url
        self.new_url = new_url
        self.existing_item_id = existing_item_id
        self.item_id = item_id
        super().__init__(
            f"Conflicting sources for {identity}: {existing_url} "
            f"(item {existing_item_id}) => {new_url} (item {item_id})"
        )


class TransformWriteError(AssetError):
    """Raised (and logged) when an output variant cannot be written."""

    def __init__(self, output_path: Path, errors: list[BaseException]):
        self.output_path = output_path
        self.errors = errors
        details = "; ".join(repr(e) for e in errors)
        super().__init__(f"Failed to write {output_path}: {details}")
