from pydantic import BaseModel, Field

DEFAULT_FILTER_KEY = "search"


class FilterSelection(BaseModel):
    """Filter state of one dashboard: which filters are ticked and their values.

    A value is only ever applied while its key is active; unticking a key
    clears its value so ticking it again starts blank.
    """

    active_keys: set[str] = Field(default_factory=lambda: {DEFAULT_FILTER_KEY})
    values: dict[str, str] = Field(default_factory=dict)

    def toggle(self, key: str, checked: bool) -> None:
        if checked:
            self.active_keys.add(key)
        else:
            self.active_keys.discard(key)
            self.values[key] = ""

    def set_value(self, key: str, value: str) -> None:
        self.values[key] = value

    def value_of(self, key: str) -> str:
        return self.values.get(key, "")

    def reset(self) -> None:
        self.active_keys = {DEFAULT_FILTER_KEY}
        self.values = {key: "" for key in self.values}

    @property
    def is_default(self) -> bool:
        """True when the "Clear Filter" control has nothing to clear."""
        has_values = any(v for v in self.values.values())
        return not has_values and self.active_keys == {DEFAULT_FILTER_KEY}
