from dataclasses import dataclass
import logging
import typing


logger = logging.getLogger(__name__)


class TransactionStackError(Exception):
    pass


@dataclass
class Transaction:

    """A Transaction is a unit of reversible work with three callables:

    - execute: apply the change; called once, when the transaction is passed
      to TransactionStack.transact()
    - undo: reverse the change
    - redo: reapply the change; defaults to execute

    The optional label is not interpreted by the stack. It can for example be
    used as the name of an undo/redo menu item.

    Any object that has execute(), undo() and redo() methods can be used in
    place of a Transaction; its label attribute is optional.
    """

    execute: typing.Callable
    undo: typing.Callable
    redo: typing.Optional[typing.Callable] = None
    label: typing.Any = None

    def __post_init__(self):
        if self.redo is None:
            self.redo = self.execute


class TransactionStack:

    """A TransactionStack manages a linear history of transaction groups and
    a position within that history.

        >>> text = []
        >>> ts = TransactionStack()

    A transaction is executed as soon as it is passed to transact():

        >>> ts.transact(Transaction(
        ...     execute=lambda: text.append("Hello"),
        ...     undo=lambda: text.pop(),
        ...     label="Typing"))
        >>> text
        ['Hello']
        >>> ts.length, ts.position
        (1, 1)

    With merge=True, the transaction is added to the most recent group, so
    both transactions are undone and redone together:

        >>> ts.transact(Transaction(
        ...     execute=lambda: text.append("World"),
        ...     undo=lambda: text.pop()), merge=True)
        >>> ts.length, ts.position
        (1, 1)
        >>> ts.undo()
        >>> text
        []
        >>> ts.redo()
        >>> text
        ['Hello', 'World']

    Undo and redo are silently ignored when there is nothing to undo or redo:

        >>> ts.redo()
        >>> ts.position
        1

    Groups at indices below `position` can be undone, groups at `position`
    and above can be redone. A new transaction discards all redoable groups.

    TransactionStack() has an optional `limit` argument, capping the number of
    groups kept. When a transact() call exceeds the limit, the oldest group is
    dropped. A limit of 0 means there is no limit.

    The optional `notificationSink` argument should be a callable taking two
    positional arguments: the kind of operation ("transact", "undo" or
    "redo") and a list of the transactions in the affected group. It is
    called once for every transact(), and for every undo() and redo() that
    actually did something. This mechanism can be used to trigger view
    updates in a GUI application.
    """

    def __init__(self, limit=0, notificationSink=None):
        self._groups = []
        self._position = 0
        self.limit = limit
        self._notificationSink = notificationSink

    def __len__(self):
        return len(self._groups)

    def __repr__(self):
        return (f"{self.__class__.__name__}(length={self.length}, "
                f"position={self.position}, limit={self.limit})")

    @property
    def length(self):
        """The number of transaction groups in the history."""
        return len(self._groups)

    @property
    def position(self):
        """The number of groups that can be undone. The group at index
        `position` is the next one to be redone.

        Assigning to position moves the cursor without executing any
        transaction, and is therefore rarely what you want.
        """
        return self._position

    @position.setter
    def position(self, position):
        if isinstance(position, bool) or not isinstance(position, int):
            raise TransactionStackError(f"position must be an integer, not {position!r}")
        if not (0 <= position <= len(self._groups)):
            raise TransactionStackError(
                f"position {position} out of range [0, {len(self._groups)}]")
        self._position = position

    @property
    def limit(self):
        """The maximum number of groups to keep, or 0 for no limit.

        Lowering the limit does not drop any groups right away; the limit is
        enforced by the next transact() call.
        """
        return self._limit

    @limit.setter
    def limit(self, limit):
        if isinstance(limit, bool) or not isinstance(limit, int) or limit < 0:
            raise TransactionStackError(f"limit must be a non-negative integer, not {limit!r}")
        self._limit = limit

    def transact(self, transaction, merge=False):
        """Execute the transaction and record it in the history.

        Any groups that could be redone are discarded. If `merge` is true and
        there is a group to merge with, the transaction is appended to the
        most recent group. Otherwise it forms a new group.

        If transaction.execute() raises, the exception propagates and the
        history is not modified.
        """
        transaction.execute()
        del self._groups[self._position:]
        if merge and self._groups:
            group = self._groups[-1]
            group.append(transaction)
            logger.debug("merged %r into group %d (%d transactions)",
                         _label(transaction), len(self._groups) - 1, len(group))
        else:
            group = [transaction]
            self._groups.append(group)
            self._position += 1
            logger.debug("new group %d: %r", len(self._groups) - 1, _label(transaction))
        self._notify("transact", group)
        if self._limit:
            self._evict()

    def _evict(self):
        # Only groups in the past can be at index 0 when the limit is
        # exceeded, as transact() has just truncated the future.
        while len(self._groups) > self._limit:
            group = self._groups.pop(0)
            self._position = max(self._position - 1, 0)
            logger.debug("evicted oldest group (%d transactions), limit is %d",
                         len(group), self._limit)

    def undo(self):
        """Undo the transactions of the most recent group, last one first.

        Does nothing if there is nothing to undo.

        The position is moved before the transactions are undone, so if one
        of them raises, the position already points at the failed group and
        the remaining transactions of that group were not undone. There is no
        rollback.
        """
        if not self._position:
            return
        self._position -= 1
        group = self._groups[self._position]
        logger.debug("undo group %d (%d transactions)", self._position, len(group))
        for transaction in reversed(group):
            transaction.undo()
        self._notify("undo", group)

    def redo(self):
        """Redo the transactions of the next group, in their original order.

        Does nothing if there is nothing to redo.

        The position is only moved after all transactions have been redone, so
        if one of them raises, the position is unchanged while the preceding
        transactions of the group have already been redone. There is no
        rollback.
        """
        if self._position >= len(self._groups):
            return
        group = self._groups[self._position]
        logger.debug("redo group %d (%d transactions)", self._position, len(group))
        for transaction in group:
            transaction.redo()
        self._position += 1
        self._notify("redo", group)

    def item(self, index):
        """Return a list of the transactions in the group at `index`, or None
        if there is no such group. Negative indices are not supported.

        The list is a copy; changing it does not affect the history.
        """
        if 0 <= index < len(self._groups):
            return list(self._groups[index])
        else:
            return None  # out of range

    def canUndo(self):
        return self._position > 0

    def canRedo(self):
        return self._position < len(self._groups)

    def undoLabel(self):
        """Return the label of the first transaction in the group that undo()
        would process, or None if there is nothing to undo.
        """
        if self.canUndo():
            return _label(self._groups[self._position - 1][0])
        else:
            return None  # nothing to undo

    def redoLabel(self):
        """Return the label of the first transaction in the group that redo()
        would process, or None if there is nothing to redo.
        """
        if self.canRedo():
            return _label(self._groups[self._position][0])
        else:
            return None  # nothing to redo

    def clearUndo(self):
        """Forget all groups that could be undone."""
        logger.debug("clearing %d undo groups", self._position)
        del self._groups[:self._position]
        self._position = 0

    def clearRedo(self):
        """Forget all groups that could be redone."""
        logger.debug("clearing %d redo groups", len(self._groups) - self._position)
        del self._groups[self._position:]

    def clear(self):
        """Forget the entire history."""
        logger.debug("clearing history")
        self._groups = []
        self._position = 0

    def _notify(self, kind, group):
        if self._notificationSink is not None:
            self._notificationSink(kind, list(group))


def _label(transaction):
    # The label is optional for transaction-like objects.
    return getattr(transaction, "label", None)
