"""# undostack

A small library to implement undo/redo via explicit transactions.

Client code performs each reversible action through a TransactionStack, by
passing it a transaction: an object that knows how to execute, undo and redo
the action. The stack executes the transaction right away and keeps it in its
history, so it can later be undone and redone:

    >>> document = {"text": ""}
    >>> def setText(old, new):
    ...     def execute():
    ...         document["text"] = new
    ...     def undo():
    ...         document["text"] = old
    ...     return Transaction(execute=execute, undo=undo, label="Typing")
    ...
    >>> ts = TransactionStack(limit=10)
    >>> ts.transact(setText("", "Hello "))
    >>> ts.transact(setText("Hello ", "Hello World!"))
    >>> document["text"]
    'Hello World!'
    >>> ts.undo()
    >>> document["text"]
    'Hello '
    >>> ts.redo()
    >>> document["text"]
    'Hello World!'

Consecutive transactions can be merged into a single undo/redo step by
passing merge=True:

    >>> ts.transact(setText("Hello World!", "Hello World! 1"))
    >>> ts.transact(setText("Hello World! 1", "Hello World! 12"), merge=True)
    >>> ts.undo()
    >>> document["text"]
    'Hello World!'

History beyond the limit is dropped, oldest first. Performing a new
transaction after an undo discards the transactions that could have been
redone.

To be told about changes, for example to update a view, pass a
notificationSink to the TransactionStack. A TransactionObservers instance
can be used to notify more than one observer.

See the Examples folder for a more elaborate example.
"""

from .observers import TransactionObservers
from .transactionStack import Transaction, TransactionStack, TransactionStackError

__all__ = ["Transaction", "TransactionObservers", "TransactionStack", "TransactionStackError"]

try:
    from ._version import version as __version__
except ImportError:
    __version__ = "<unknown>"
