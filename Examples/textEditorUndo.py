from dataclasses import dataclass
from undostack import Transaction, TransactionObservers, TransactionStack


@dataclass
class Editor:

    html: str = ""


def editTransaction(editor, newHTML, label=None):
    oldHTML = editor.html

    def execute():
        editor.html = newHTML

    def undo():
        editor.html = oldHTML

    return Transaction(execute=execute, undo=undo, label=label)


if __name__ == "__main__":
    editor = Editor()
    notifications = []
    observers = TransactionObservers()
    observers.addObserver(lambda kind, transactions: notifications.append((kind, len(transactions))))
    ts = TransactionStack(limit=10, notificationSink=observers)

    ts.transact(editTransaction(editor, "Hello ", label="Typing"))
    ts.transact(editTransaction(editor, "Hello World!", label="Typing"))
    ts.transact(editTransaction(editor, "Hello World! 1", label="Typing"))
    ts.transact(editTransaction(editor, "Hello World! 12"), merge=True)
    ts.transact(editTransaction(editor, "Hello World! 123"), merge=True)
    ts.transact(editTransaction(editor, "Hello <b>World</b>! 123", label="Bold"))
    assert editor.html == "Hello <b>World</b>! 123"
    assert ts.length == 4
    assert ts.position == 4
    assert ts.undoLabel() == "Bold"

    ts.undo()
    assert editor.html == "Hello World! 123"
    ts.undo()
    assert editor.html == "Hello World!"
    ts.undo()
    assert editor.html == "Hello "
    assert ts.position == 1

    ts.redo()
    assert editor.html == "Hello World!"
    ts.redo()
    assert editor.html == "Hello World! 123"
    assert ts.redoLabel() == "Bold"

    assert notifications == [
        ("transact", 1),
        ("transact", 1),
        ("transact", 1),
        ("transact", 2),
        ("transact", 3),
        ("transact", 1),
        ("undo", 1),
        ("undo", 3),
        ("undo", 1),
        ("redo", 1),
        ("redo", 3),
    ]
