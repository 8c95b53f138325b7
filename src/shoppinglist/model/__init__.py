"""
The MODEL layer contains pure data structures and business logic.
It has NO knowledge of the widgets. It deals with the list entries,
their validation rules, and their persisted representation.
"""
