from collections import deque
from typing import Deque, Iterator, List, Union

from items import EmptyContainerError, Item, ItemValue, as_item


class Stack:
    """
    Pila LIFO (Last In First Out) usando una lista de Python.
    El último elemento agregado es el primero que se saca o se consulta.
    """

    def __init__(self, name: str = "stack") -> None:
        # name solo se usa para mensajes de error más claros.
        self.name: str = name
        # Lista interna; el tope es el final de la lista.
        self._items: List[Item] = []

    def add_item(self, item: Union[Item, ItemValue]) -> None:
        item = as_item(item)
        self._items.append(item)

    def get_last_item(self) -> Item:
        if not self._items:
            raise EmptyContainerError(
                f"No se puede hacer get_last_item() en la pila vacía '{self.name}'"
            )
        return self._items.pop()

    def peek_last_item(self) -> Item:
        if not self._items:
            raise EmptyContainerError(
                f"No se puede hacer peek_last_item() en la pila vacía '{self.name}'"
            )
        return self._items[-1]

    def is_empty(self) -> bool:
        return len(self._items) == 0

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"{self.name}: {[item.value for item in self._items]}"


class Queue:
    """
    Fila FIFO (First In First Out).

    Internamente es un deque: se agrega por la derecha y se saca por la
    izquierda, así ambas operaciones son O(1). Lo único que importa hacia
    afuera es el orden FIFO, no el lado por donde entra cada elemento.
    """

    def __init__(self, name: str = "queue") -> None:
        self.name: str = name
        self._items: Deque[Item] = deque()

    def add_item(self, item: Union[Item, ItemValue]) -> None:
        item = as_item(item)
        self._items.append(item)

    def get_first_item(self) -> Item:
        if not self._items:
            raise EmptyContainerError(
                f"No se puede hacer get_first_item() en la fila vacía '{self.name}'"
            )
        return self._items.popleft()

    def peek_first_item(self) -> Item:
        if not self._items:
            raise EmptyContainerError(
                f"No se puede hacer peek_first_item() en la fila vacía '{self.name}'"
            )
        return self._items[0]

    def is_empty(self) -> bool:
        return len(self._items) == 0

    def __iter__(self) -> Iterator[Item]:
        # Del más viejo al más nuevo.
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"{self.name}: {[item.value for item in self._items]}"
