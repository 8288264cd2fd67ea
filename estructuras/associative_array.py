from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Union

from loguru import logger

from items import InvalidItemError, Item, ItemValue, as_item


def report_key_not_found(key: str) -> None:
    """
    Reporta una llave inexistente sin interrumpir al programa que llama.
    """
    logger.warning("{} not found", key)


def _check_key(key: str) -> str:
    if not isinstance(key, str):
        raise InvalidItemError(
            f"La llave debe ser str, se recibió {type(key).__name__} ({key!r})"
        )
    return key


@dataclass
class Pair:
    """
    Una asociación (llave, valor). El valor se puede reasignar; la llave no cambia.
    """
    key: str
    value: Item

    def __str__(self) -> str:
        return f"{self.key}, {self.value}"


class AssociativeArray:
    """
    Arreglo asociativo con búsqueda lineal.

    - insert agrega siempre un par nuevo, aunque la llave ya exista.
    - reassign, remove y lookup recorren los pares en orden de inserción
      y solo actúan sobre la PRIMERA coincidencia.
    - Una llave inexistente nunca lanza excepción: se reporta con
      report_key_not_found y la operación no modifica nada.
    """

    def __init__(self) -> None:
        self._pairs: List[Pair] = []

    def is_empty(self) -> bool:
        return len(self._pairs) == 0

    def insert(self, key: str, value: Union[Item, ItemValue]) -> None:
        pair = Pair(_check_key(key), as_item(value))
        self._pairs.append(pair)

    def reassign(self, key: str, new_value: Union[Item, ItemValue]) -> bool:
        new_item = as_item(new_value)
        for pair in self._pairs:
            if pair.key == key:
                pair.value = new_item
                return True
        report_key_not_found(key)
        return False

    def remove(self, key: str) -> bool:
        for index, pair in enumerate(self._pairs):
            if pair.key == key:
                del self._pairs[index]
                return True
        report_key_not_found(key)
        return False

    def lookup(self, key: str) -> Optional[Item]:
        for pair in self._pairs:
            if pair.key == key:
                return pair.value
        report_key_not_found(key)
        return None

    def has(self, key: str) -> bool:
        return any(pair.key == key for pair in self._pairs)

    def keys(self) -> List[str]:
        return [pair.key for pair in self._pairs]

    def __iter__(self) -> Iterator[Pair]:
        return iter(self._pairs)

    def __len__(self) -> int:
        return len(self._pairs)

    def __repr__(self) -> str:
        return f"AssociativeArray([{'; '.join(str(pair) for pair in self._pairs)}])"


class UniqueKeyAssociativeArray:
    """
    Variante respaldada por un dict de Python.

    No es un reemplazo de AssociativeArray: aquí insert con una llave que ya
    existe sobreescribe su valor en lugar de agregar un duplicado.
    El manejo de llaves inexistentes es el mismo (se reporta, no se lanza).
    """

    def __init__(self) -> None:
        self._storage: Dict[str, Item] = {}

    def is_empty(self) -> bool:
        return len(self._storage) == 0

    def insert(self, key: str, value: Union[Item, ItemValue]) -> None:
        self._storage[_check_key(key)] = as_item(value)

    def reassign(self, key: str, new_value: Union[Item, ItemValue]) -> bool:
        if not self._contains(key):
            report_key_not_found(key)
            return False
        self._storage[key] = as_item(new_value)
        return True

    def remove(self, key: str) -> bool:
        if not self._contains(key):
            report_key_not_found(key)
            return False
        del self._storage[key]
        return True

    def lookup(self, key: str) -> Optional[Item]:
        if not self._contains(key):
            report_key_not_found(key)
            return None
        return self._storage[key]

    def has(self, key: str) -> bool:
        return self._contains(key)

    def keys(self) -> List[str]:
        return list(self._storage)

    def __iter__(self) -> Iterator[Pair]:
        return (Pair(key, value) for key, value in self._storage.items())

    def __len__(self) -> int:
        return len(self._storage)

    def __repr__(self) -> str:
        return f"UniqueKeyAssociativeArray([{'; '.join(str(pair) for pair in self)}])"

    def _contains(self, key: str) -> bool:
        # Una llave que no es str nunca se pudo insertar; no se busca en el dict
        # para no fallar con llaves que no son hashables.
        return isinstance(key, str) and key in self._storage
