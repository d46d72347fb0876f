from typing import TYPE_CHECKING, Callable, Dict, Generic, Iterator, Optional, Tuple, Type, TypeVar

if TYPE_CHECKING:
    from ..schemas.base import BaseSchema
    from .writers import BaseWriter

T = TypeVar("T")


class BaseRegistry(Generic[T]):
    """Maps names to registered classes, with an optional description for each.

    Every subclass gets its own storage and shows up in `BaseRegistry.registries()`, which is
    what `trecparse list` prints.
    """

    _all_registries: Dict[str, Type["BaseRegistry"]] = {}
    _entries: Dict[str, Tuple[T, Optional[str]]]

    def __init_subclass__(cls, **kwargs) -> None:
        super().__init_subclass__(**kwargs)
        cls._entries = {}
        BaseRegistry._all_registries[cls.__name__] = cls

    @classmethod
    def registries(cls) -> Iterator[Tuple[str, Type["BaseRegistry"]]]:
        return iter(sorted(BaseRegistry._all_registries.items()))

    @classmethod
    def add(cls, name: str, desc: Optional[str] = None) -> Callable[[T], T]:
        """Class decorator registering the decorated object under `name`."""

        def _register(obj: T) -> T:
            if name in cls._entries and cls._entries[name][0] is not obj:
                raise ValueError(f"{name} is already registered in {cls.__name__}")
            cls._entries[name] = (obj, desc)
            return obj

        return _register

    @classmethod
    def remove(cls, name: str) -> bool:
        return cls._entries.pop(name, None) is not None

    @classmethod
    def has(cls, name: str) -> bool:
        return name in cls._entries

    @classmethod
    def get(cls, name: str) -> T:
        if name not in cls._entries:
            raise ValueError(f"Unknown {cls.__name__} entry {name}; available: {', '.join(cls.names())}")
        return cls._entries[name][0]

    @classmethod
    def names(cls) -> Iterator[str]:
        return iter(sorted(cls._entries))

    @classmethod
    def items(cls) -> Iterator[Tuple[str, T]]:
        for name in cls.names():
            yield name, cls._entries[name][0]

    @classmethod
    def items_with_description(cls) -> Iterator[Tuple[str, T, Optional[str]]]:
        for name in cls.names():
            obj, desc = cls._entries[name]
            yield name, obj, desc


class SchemaRegistry(BaseRegistry[Type["BaseSchema"]]):
    pass


class WriterRegistry(BaseRegistry[Type["BaseWriter"]]):
    pass
