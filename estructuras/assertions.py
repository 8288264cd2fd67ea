from typing import Any

from items import Item


def _plain(value: Any) -> Any:
    # Compara Items por su valor para poder escribir assert_equal(item, 3, ...)
    if isinstance(value, Item):
        return value.value
    return value


def assert_equal(actual: Any, expected: Any, message: str) -> bool:
    """
    Compara dos valores. Si son distintos imprime un diagnóstico, pero nunca lanza.

    Regresa True si los valores son iguales.
    """
    left, right = _plain(actual), _plain(expected)
    # Evita que True == 1 cuente como igualdad entre un BOOLEAN y un NUMBER.
    same_kind = isinstance(left, bool) == isinstance(right, bool)
    if same_kind and left == right:
        return True
    print("Assertion Failed: ", message)
    print(left, "does not equal", right)
    return False
