import pytest

from items import EmptyContainerError, Item
from linear_structures import Queue, Stack

VALUES = [1, "two", True, 4.5, "five"]


def test_stack_literal_scenario():
    stack = Stack()
    assert stack.is_empty()
    stack.add_item(3)
    assert not stack.is_empty()
    assert stack.peek_last_item() == Item(3)
    assert len(stack) == 1
    assert stack.get_last_item().value == 3
    assert stack.is_empty()

def test_stack_lifo_order():
    stack = Stack()
    for value in VALUES:
        stack.add_item(value)
    popped = [stack.get_last_item().value for _ in VALUES]
    assert popped == list(reversed(VALUES))
    assert stack.is_empty()

def test_stack_peek_does_not_mutate():
    stack = Stack()
    stack.add_item("a")
    stack.add_item("b")
    assert stack.peek_last_item().value == "b"
    assert stack.peek_last_item().value == "b"
    assert len(stack) == 2
    assert repr(stack) == "stack: ['a', 'b']"

@pytest.mark.parametrize("operation", ["get_last_item", "peek_last_item"])
def test_stack_empty_access_fails(operation):
    stack = Stack("OPERANDS")
    with pytest.raises(EmptyContainerError, match="OPERANDS"):
        getattr(stack, operation)()

def test_stack_empty_again_after_last_removal():
    stack = Stack()
    stack.add_item(1)
    stack.get_last_item()
    try:
        stack.get_last_item()
        assert False, "Debió fallar en pila vacía"
    except IndexError:
        assert stack.is_empty()

def test_queue_literal_scenario():
    queue = Queue()
    assert queue.is_empty()
    queue.add_item(3)
    assert queue.peek_first_item().value == 3
    assert queue.get_first_item().value == 3
    assert queue.is_empty()

def test_queue_fifo_order():
    queue = Queue()
    for value in VALUES:
        queue.add_item(Item(value))
    assert [item.value for item in queue] == VALUES
    removed = [queue.get_first_item().value for _ in VALUES]
    assert removed == VALUES
    assert queue.is_empty()

def test_queue_interleaved_operations():
    queue = Queue()
    queue.add_item(1)
    queue.add_item(2)
    assert queue.get_first_item().value == 1
    queue.add_item(3)
    assert queue.peek_first_item().value == 2
    assert len(queue) == 2
    assert [queue.get_first_item().value, queue.get_first_item().value] == [2, 3]

@pytest.mark.parametrize("operation", ["get_first_item", "peek_first_item"])
def test_queue_empty_access_fails(operation):
    with pytest.raises(EmptyContainerError):
        getattr(Queue(), operation)()

def test_adding_items_does_not_log(all_log_messages):
    stack = Stack()
    queue = Queue()
    stack.add_item(1)
    queue.add_item("a")
    stack.peek_last_item()
    queue.get_first_item()
    assert all_log_messages == []
