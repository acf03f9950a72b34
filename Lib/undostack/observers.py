import logging


logger = logging.getLogger(__name__)


class TransactionObservers:

    """A notification sink that passes each notification on to any number
    of observers, in the order they were added.

        >>> from undostack import Transaction, TransactionStack
        >>> seen = []
        >>> observers = TransactionObservers()
        >>> observers.addObserver(lambda kind, transactions: seen.append(kind))
        >>> ts = TransactionStack(notificationSink=observers)
        >>> ts.transact(Transaction(execute=lambda: None, undo=lambda: None))
        >>> seen
        ['transact']

    An observer is a callable taking the kind of operation ("transact",
    "undo" or "redo") and the list of transactions in the affected group.
    Adding or removing observers while a notification is being dispatched
    takes effect from the next notification on.
    """

    def __init__(self, observers=()):
        self._observers = list(observers)

    def __len__(self):
        return len(self._observers)

    def addObserver(self, observer):
        self._observers.append(observer)

    def removeObserver(self, observer):
        """Remove an observer. Raises ValueError if it was not added."""
        self._observers.remove(observer)

    def __call__(self, kind, transactions):
        logger.debug("dispatching %r to %d observers", kind, len(self._observers))
        for observer in list(self._observers):
            observer(kind, transactions)
