from dataclasses import dataclass, field
from typing import Union

TypeName = str

NUMBER: TypeName = "NUMBER"
STRING: TypeName = "STRING"
BOOLEAN: TypeName = "BOOLEAN"

ItemValue = Union[int, float, str, bool]


# ERRORES DE LAS ESTRUCTURAS
class StructureError(Exception):
    pass

class EmptyContainerError(StructureError, IndexError):
    pass

class InvalidItemError(StructureError, TypeError):
    pass


def item_type(value: ItemValue) -> TypeName:
    """
    Clasifica un valor crudo dentro de la unión cerrada NUMBER | STRING | BOOLEAN.

    bool se revisa antes que int porque en Python bool es subclase de int.
    Lanza InvalidItemError para cualquier otro tipo.
    """
    if isinstance(value, bool):
        return BOOLEAN
    if isinstance(value, (int, float)):
        return NUMBER
    if isinstance(value, str):
        return STRING
    raise InvalidItemError(
        f"Tipo no soportado para un Item: {type(value).__name__} ({value!r})"
    )


@dataclass(frozen=True)
class Item:
    """
    Envoltura inmutable de un valor primitivo (número, texto o booleano).

    El tipo se guarda como campo para que la igualdad y el hash lo incluyan:
    Item(True) e Item(1) son distintos aunque True == 1 en Python.
    """
    value: ItemValue
    type: TypeName = field(init=False)

    def __post_init__(self) -> None:
        # Valida al construir; después ya no puede cambiar.
        object.__setattr__(self, "type", item_type(self.value))

    def __str__(self) -> str:
        return str(self.value)


def as_item(value: Union[Item, ItemValue]) -> Item:
    """
    Regresa el mismo Item si ya lo es, o envuelve el valor crudo.
    """
    if isinstance(value, Item):
        return value
    return Item(value)
