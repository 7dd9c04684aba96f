"""Transport, URL assembly and error primitives."""

__all__: list[str] = []
