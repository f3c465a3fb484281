import pytest

from dsakit.errors import CapacityError, EmptyError
from dsakit.stacks import (
    BoundedStack,
    LinkedStack,
    QueueStack,
    TwoStackQueue,
    reverse_stack,
    sort_stack,
    stacks_equal,
)


def test_bounded_stack_lifo():
    stack = BoundedStack(3)
    for value in (1, 2, 3):
        stack.push(value)
    assert stack.peek() == 3
    assert [stack.pop() for _ in range(len(stack))] == [3, 2, 1]


def test_bounded_stack_overflow_and_underflow():
    stack = BoundedStack(1)
    stack.push(9)
    with pytest.raises(CapacityError):
        stack.push(10)
    assert stack.pop() == 9
    with pytest.raises(EmptyError):
        stack.pop()
    with pytest.raises(EmptyError):
        stack.peek()


def test_bounded_stack_negative_capacity():
    with pytest.raises(ValueError):
        BoundedStack(-2)


def test_linked_stack_pops_in_reverse_push_order():
    stack = LinkedStack()
    values = [4, 8, 15, 16]
    for value in values:
        stack.push(value)
    assert len(stack) == len(values)
    assert stack.peek() == 16
    assert [stack.pop() for _ in values] == values[::-1]
    assert len(stack) == 0


def test_linked_stack_empty_errors():
    stack = LinkedStack()
    with pytest.raises(EmptyError):
        stack.pop()
    with pytest.raises(EmptyError):
        stack.peek()


def test_two_stack_queue_source_walkthrough():
    q = TwoStackQueue()
    q.enqueue(1)
    q.enqueue(2)
    q.enqueue(3)
    assert q.dequeue() == 1
    assert q.dequeue() == 2
    q.enqueue(4)
    assert q.dequeue() == 3
    assert q.dequeue() == 4
    with pytest.raises(EmptyError):
        q.dequeue()
    assert len(q) == 0


def test_two_stack_queue_len_tracks_both_stacks():
    q = TwoStackQueue()
    q.enqueue("a")
    q.enqueue("b")
    q.dequeue()
    q.enqueue("c")
    assert len(q) == 2
    assert [q.dequeue(), q.dequeue()] == ["b", "c"]


def test_queue_stack_source_walkthrough():
    stack = QueueStack()
    for value in (1, 2, 3, 4):
        stack.push(value)
    assert stack.top() == 4
    assert stack.pop() == 4
    assert stack.pop() == 3
    assert stack.top() == 2
    assert len(stack) == 2


def test_queue_stack_top_does_not_remove():
    stack = QueueStack()
    stack.push("x")
    stack.push("y")
    assert stack.top() == "y"
    assert stack.top() == "y"
    assert stack.pop() == "y"
    assert stack.pop() == "x"
    with pytest.raises(EmptyError):
        stack.pop()
    with pytest.raises(EmptyError):
        stack.top()


def test_reverse_stack_source_example():
    stack = [10, 20, 30, 40]
    reverse_stack(stack)
    assert stack == [40, 30, 20, 10]


def test_sort_stack_puts_largest_on_top():
    stack = [3, 1, 4, 2, 5]
    sort_stack(stack)
    assert stack[-1] == max(stack)
    assert sorted(stack) == stack
    assert len(stack) == 5


def test_sort_stack_keeps_duplicates():
    stack = [3, 1, 4, 2, 5, 3, 1, 4, 2, 5]
    sort_stack(stack)
    assert stack == [1, 1, 2, 2, 3, 3, 4, 4, 5, 5]


@pytest.mark.parametrize(
    "first, second, expected",
    [
        ([1, 2, 3], [1, 2, 3], True),
        ([1, 2, 3], [1, 2], False),
        ([1, 2, 3], [3, 2, 1], False),
        ([], [], True),
    ],
)
def test_stacks_equal(first, second, expected):
    assert stacks_equal(first, second) is expected