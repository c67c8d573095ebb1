"""Request building, execution and error mapping."""

__all__: list[str] = []
