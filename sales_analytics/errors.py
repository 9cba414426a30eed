class SalesAnalysisError(ValueError):
    """Raised when the analysis input is rejected before any work is done."""


class MissingInputError(SalesAnalysisError):
    def __init__(self) -> None:
        super().__init__("No input data supplied")


class InvalidCollectionError(SalesAnalysisError):
    def __init__(self, collection: str) -> None:
        self.collection = collection
        super().__init__(f"'{collection}' must be a non-empty list")


class MissingStrategyError(SalesAnalysisError):
    def __init__(self, missing: list[str]) -> None:
        self.missing = missing
        super().__init__(f"Calculation functions not supplied: {', '.join(missing)}")
