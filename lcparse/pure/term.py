"""Pure lambda calculus abstract syntax tree.

```
<λ-term> ::= <variable>                 ; "variable"
                                        ; - one or more ASCII letters
           | "\\" <variable> "." <λ-term> ; "abstraction"
                                        ; - \\x y . M is sugar for \\x . \\y . M
           | <λ-term> <λ-term>          ; "application"
                                        ; - associating by left: a b c d = (((a b) c) d)
```

Every node exclusively owns its children: trees are built bottom-up and never share or point back to a node, so a
tree is always finite and acyclic. Bound variables are matched by name only (an Abstraction's parameter is its own
Variable, unrelated to the occurrences in its body).
"""

from abc import ABC, abstractmethod


class LambdaTerm(ABC):
    """A node in the syntax tree: Variable, Application or Abstraction."""

    @property
    @abstractmethod
    def nodes(self):
        """Ordered children of this node (empty for Variables)."""

    @abstractmethod
    def _fields(self):
        """Constructor arguments of this node, used for equality and repr."""

    def display(self, indents=0):
        """Recursively displays the tree with readable format.

        Format:
        <LambdaTerm>(nodes=[
            <LambdaTerm>(nodes=[
                ...
                Variable('<name>')  # <-- leaves
            ])
        ])
        """
        if not self.nodes:
            return f"{'    ' * indents}{self!r}"

        result = f"{'    ' * indents}{type(self).__name__}(nodes=["
        for node in self.nodes:
            if node is None:
                result += f"\n{'    ' * (indents + 1)}None,"
            else:
                result += "\n" + node.display(indents + 1) + ","
        return result[:-1] + f"\n{'    ' * indents}])"

    def __eq__(self, other):
        return type(self) is type(other) and self._fields() == other._fields()

    def __hash__(self):
        return hash((type(self).__name__, self._fields()))

    def __repr__(self):
        return f"{type(self).__name__}({', '.join(repr(field) for field in self._fields())})"

    def __str__(self):
        return self.display()


class Variable(LambdaTerm):
    """Variable occurrence, free or bound. Names are not validated here: that is the tokenizer's job."""

    def __init__(self, name):
        self.name = name

    @property
    def nodes(self):
        return []

    def _fields(self):
        return (self.name,)


class Application(LambdaTerm):
    """Application of function to argument."""

    def __init__(self, function, argument):
        self.function = function
        self.argument = argument

    @property
    def nodes(self):
        return [self.function, self.argument]

    def _fields(self):
        return self.function, self.argument


class Abstraction(LambdaTerm):
    """Single-parameter binder. Multi-parameter binders are chains of Abstractions (see curry)."""

    def __init__(self, parameter, body):
        if isinstance(parameter, str):
            parameter = Variable(parameter)
        self.parameter = parameter
        self.body = body

    @property
    def nodes(self):
        return [self.parameter, self.body]

    def _fields(self):
        return self.parameter, self.body

    @classmethod
    def curry(cls, parameters, body):
        """Builds \\p1 . \\p2 . ... \\pn . body from [p1, ..., pn]. parameters must not be empty."""
        if not parameters:
            raise ValueError("abstraction needs at least one parameter")

        for parameter in reversed(parameters):
            body = cls(parameter, body)
        return body

    def uncurry(self):
        """Returns ([p1, ..., pn], body) by following the body chain while it is an Abstraction."""
        parameters = []
        term = self
        while isinstance(term, Abstraction):
            parameters.append(term.parameter)
            term = term.body
        return parameters, term
