"""Mind Palace package.

A small command-line assistant that files short memories into named rooms
of a JSON document and lets a chat model decide whether each utterance is a
question, a new memory, or a search. Modules do not perform network or file
I/O on import.
"""

__all__ = [
    "__version__",
]

__version__ = "0.1.0"
