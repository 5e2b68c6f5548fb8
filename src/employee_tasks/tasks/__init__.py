"""Employee task lists: validation, storage and use cases.

Each employee owns one document holding two ordered task lists, ``todo`` and
``done``. Tasks are only ever appended to ``todo`` and the append is a single
atomic UPDATE against the employee row, so concurrent writers for the same
employee cannot drop each other's tasks.
"""
