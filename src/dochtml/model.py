"""Typed documentation model for dochtml.

The model describes the public surface of one compiled module: its overview
prose, constant and variable groups, functions, types with their methods,
runnable examples, and annotation notes. It is produced upstream by a source
parser and handed to ``render()`` read-only.

Model Hierarchy:
Package
├── consts / vars: Value
├── funcs: Func
│   └── examples: Example
├── types: Type
│   ├── consts / vars: Value
│   ├── funcs: Func (constructors)
│   ├── methods: Func (with recv)
│   └── examples: Example
├── examples: Example (package-level)
└── notes: marker -> Note

Source nodes (Decl, Code, Comment) carry an optional SourceLocation so
source-link resolvers can point into a code browser.

Thread Safety:
All model classes are frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from enum import Enum

from dochtml.location import SourceLocation

# =============================================================================
# Source nodes
# =============================================================================


@dataclass(frozen=True, slots=True)
class Node:
    """Base class for source nodes handed to source-link resolvers."""

    location: SourceLocation | None = field(default=None, kw_only=True)


@dataclass(frozen=True, slots=True)
class Decl(Node):
    """Declaration source text, e.g. ``func New(n int) *Ring``."""

    text: str = ""


@dataclass(frozen=True, slots=True)
class Code(Node):
    """Body of a runnable example."""

    text: str = ""


@dataclass(frozen=True, slots=True)
class Comment(Node):
    """Comment attached to an example body.

    Comments are kept apart from the code text by the parser and merged back
    in by line when the example is rendered.

    """

    text: str = ""


# =============================================================================
# Declarations
# =============================================================================


@dataclass(frozen=True, slots=True)
class Example:
    """A runnable example attached to the package or to a declaration.

    Attributes:
        name: Name of the example function upstream (informational)
        suffix: Disambiguates several examples on the same declaration
        doc: Example prose
        code: Example body
        comments: Comments attached to the body
        output: Expected output text
        empty_output: Output was declared but is empty
        unordered: Output lines may appear in any order

    """

    name: str = ""
    suffix: str = ""
    doc: str = ""
    code: Code = field(default_factory=Code)
    comments: tuple[Comment, ...] = ()
    output: str = ""
    empty_output: bool = False
    unordered: bool = False

    @property
    def has_output(self) -> bool:
        """True when an output block should be shown."""
        return bool(self.output) or self.empty_output


@dataclass(frozen=True, slots=True)
class Value:
    """A constant or variable declaration group."""

    names: tuple[str, ...] = ()
    doc: str = ""
    decl: Decl = field(default_factory=Decl)


@dataclass(frozen=True, slots=True)
class Func:
    """A function, constructor, or method.

    ``recv`` holds the receiver text for methods (e.g. ``r *Ring``) and is
    empty for plain functions.

    """

    name: str
    doc: str = ""
    decl: Decl = field(default_factory=Decl)
    recv: str = ""
    examples: tuple[Example, ...] = ()


@dataclass(frozen=True, slots=True)
class Type:
    """A type with its associated constants, variables, functions and methods."""

    name: str
    doc: str = ""
    decl: Decl = field(default_factory=Decl)
    consts: tuple[Value, ...] = ()
    vars: tuple[Value, ...] = ()
    funcs: tuple[Func, ...] = ()
    methods: tuple[Func, ...] = ()
    examples: tuple[Example, ...] = ()


@dataclass(frozen=True, slots=True)
class Note:
    """An annotation note such as ``BUG(uid): body``."""

    body: str
    uid: str = ""


# =============================================================================
# Package
# =============================================================================


class ModuleRole(Enum):
    """Whether the module is importable or a standalone executable."""

    LIBRARY = "library"
    COMMAND = "command"


@dataclass(frozen=True, slots=True)
class Package:
    """Documentation model for one module.

    Attributes:
        name: Module name
        import_path: Full import path (optional)
        doc: Overview prose
        role: LIBRARY or COMMAND
        consts: Top-level constant groups
        vars: Top-level variable groups
        funcs: Top-level functions
        types: Top-level types
        examples: Package-level examples
        notes: Marker (e.g. "BUG") to notes, rendered in marker order

    """

    name: str = ""
    import_path: str = ""
    doc: str = ""
    role: ModuleRole = ModuleRole.LIBRARY
    consts: tuple[Value, ...] = ()
    vars: tuple[Value, ...] = ()
    funcs: tuple[Func, ...] = ()
    types: tuple[Type, ...] = ()
    examples: tuple[Example, ...] = ()
    notes: Mapping[str, tuple[Note, ...]] = field(default_factory=dict)

    @property
    def is_command(self) -> bool:
        """True for executable entry-point modules."""
        return self.role is ModuleRole.COMMAND

    @property
    def has_declarations(self) -> bool:
        """True when any constant, variable, function or type exists."""
        return bool(self.consts or self.vars or self.funcs or self.types)

    @property
    def label(self) -> str:
        """Best name for messages: import path, else name."""
        return self.import_path or self.name

    def without_declarations(self) -> Package:
        """Copy keeping only overview prose and notes.

        Used for command modules, whose declarations are not documented.
        The receiver is not modified.
        """
        return replace(self, consts=(), vars=(), funcs=(), types=(), examples=())


__all__ = [
    "Code",
    "Comment",
    "Decl",
    "Example",
    "Func",
    "ModuleRole",
    "Node",
    "Note",
    "Package",
    "Type",
    "Value",
]
