"""Restricted arithmetic expressions in one variable ``n``.

User text is tokenized and parsed by a small recursive-descent parser that
builds a SymPy expression directly; nothing the user types is ever handed to
``eval`` or ``sympify``. The tree is then lambdified to NumPy for sampling.

Grammar::

    expr   := term (('+' | '-') term)*
    term   := unary (('*' | '/' | '%') unary)*
    unary  := ('+' | '-') unary | power
    power  := atom (('^' | '**') unary)?
    atom   := NUMBER | NAME | NAME '(' args ')' | '(' expr ')'
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Callable, List, NamedTuple

import numpy as np
import sympy as sp

from ._errors import ExpressionError
from ._log import log

n = sp.Symbol("n", positive=True)

# Exact numbers are computed eagerly by SymPy; keep them well under the
# 4300-digit int-to-str limit lambdify runs into.
MAX_LITERAL_DIGITS = 1000
LOG10_2 = math.log10(2)


# --------------------------
# Safe factorial for lambdify
# --------------------------
def np_factorial_safe(x):
    x = np.asarray(x, dtype=float)
    out = np.full_like(x, np.nan, dtype=float)
    for i, val in np.ndenumerate(x):
        if not np.isfinite(val) or val < 0 or val != math.floor(val):
            continue
        iv = int(val)
        out[i] = np.inf if iv > 170 else float(math.factorial(iv))
    return out


def _log(*args):
    if len(args) == 2:
        return sp.log(args[0], args[1])
    return sp.log(args[0])


def _factorial(x):
    # numeric arguments stay unevaluated so factorial(100000) is not expanded
    return sp.factorial(x, evaluate=not x.is_number)


# name -> (builder, allowed argument counts)
FUNCTIONS = {
    "log": (_log, (1, 2)),
    "ln": (sp.log, (1,)),
    "log2": (lambda x: sp.log(x, 2), (1,)),
    "log10": (lambda x: sp.log(x, 10), (1,)),
    "sqrt": (sp.sqrt, (1,)),
    "cbrt": (sp.cbrt, (1,)),
    "exp": (sp.exp, (1,)),
    "pow": (lambda a, b: _power(a, b), (2,)),
    "abs": (sp.Abs, (1,)),
    "floor": (sp.floor, (1,)),
    "ceil": (sp.ceiling, (1,)),
    "factorial": (_factorial, (1,)),
}

CONSTANTS = {
    "pi": sp.pi,
    "PI": sp.pi,
    "e": sp.E,
    "E": sp.E,
}

VARIABLE = "n"
HOST_PREFIX = "Math."


def _digits(value) -> float:
    """Approximate decimal digits of a numeric value; 0 for symbolic ones."""
    if value.is_Rational:
        bits = abs(value.p).bit_length() - 1 + value.q.bit_length() - 1
        return max(bits, 0) * LOG10_2
    if value.is_number and value.is_real and value.is_nonzero:
        # sqrt(2)^k and friends are expanded to exact rationals too
        return abs(math.log10(abs(float(value))))
    return 0.0


def _bounded(value, pos: int = -1):
    if _digits(value) > MAX_LITERAL_DIGITS:
        raise ExpressionError("number too large", pos)
    return value


def _power(base, exponent):
    if base.is_number and exponent.is_number and exponent.is_real:
        if abs(float(exponent)) * _digits(base) > MAX_LITERAL_DIGITS:
            raise ExpressionError("number too large")
    return _bounded(sp.Pow(base, exponent))


def _literal(tok):
    mantissa, _, exponent = tok.text.lower().partition("e")
    if len(mantissa) + abs(int(exponent or 0)) > MAX_LITERAL_DIGITS:
        raise ExpressionError("numeric literal too large", tok.pos)
    return sp.Rational(tok.text)


# --------------------------
# Tokenizer
# --------------------------
class Token(NamedTuple):
    kind: str
    text: str
    pos: int


_TOKEN_RE = re.compile(
    r"""
    (?P<ws>\s+)
  | (?P<num>(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)
  | (?P<name>[A-Za-z_]\w*(?:\.[A-Za-z_]\w*)*)
  | (?P<op>\*\*|[-+*/%^])
  | (?P<lparen>\()
  | (?P<rparen>\))
  | (?P<comma>,)
    """,
    re.VERBOSE,
)


def tokenize(text: str) -> List[Token]:
    tokens = []
    pos = 0
    while pos < len(text):
        m = _TOKEN_RE.match(text, pos)
        if m is None:
            raise ExpressionError(f"unexpected character {text[pos]!r}", pos)
        if m.lastgroup != "ws":
            tokens.append(Token(m.lastgroup, m.group(), pos))
        pos = m.end()
    tokens.append(Token("end", "", len(text)))
    return tokens


# --------------------------
# Parser
# --------------------------
class _Parser:
    def __init__(self, text: str):
        self.tokens = tokenize(text)
        self.i = 0

    @property
    def tok(self) -> Token:
        return self.tokens[self.i]

    def advance(self) -> Token:
        tok = self.tokens[self.i]
        self.i += 1
        return tok

    def expect(self, kind: str, what: str) -> Token:
        if self.tok.kind != kind:
            raise ExpressionError(f"expected {what}", self.tok.pos)
        return self.advance()

    def parse(self):
        if self.tok.kind == "end":
            raise ExpressionError("empty expression")
        node = self.expr()
        if self.tok.kind != "end":
            raise ExpressionError(f"unexpected {self.tok.text!r}", self.tok.pos)
        return node

    def expr(self):
        node = self.term()
        while self.tok.kind == "op" and self.tok.text in "+-":
            op = self.advance().text
            rhs = self.term()
            node = _bounded(node + rhs if op == "+" else node - rhs)
        return node

    def term(self):
        node = self.unary()
        while self.tok.kind == "op" and self.tok.text in ("*", "/", "%"):
            op = self.advance().text
            rhs = self.unary()
            if op == "*":
                node = node * rhs
            elif op == "/":
                node = node / rhs
            else:
                node = sp.Mod(node, rhs)
            node = _bounded(node)
        return node

    def unary(self):
        if self.tok.kind == "op" and self.tok.text in "+-":
            op = self.advance().text
            operand = self.unary()
            return -operand if op == "-" else operand
        return self.power()

    def power(self):
        base = self.atom()
        if self.tok.kind == "op" and self.tok.text in ("^", "**"):
            self.advance()
            return _power(base, self.unary())
        return base

    def atom(self):
        tok = self.tok
        if tok.kind == "num":
            self.advance()
            return _literal(tok)
        if tok.kind == "lparen":
            self.advance()
            node = self.expr()
            self.expect("rparen", "')'")
            return node
        if tok.kind == "name":
            self.advance()
            return self.name(tok)
        if tok.kind == "end":
            raise ExpressionError("unexpected end of expression", tok.pos)
        raise ExpressionError(f"unexpected {tok.text!r}", tok.pos)

    def name(self, tok: Token):
        name = tok.text
        if name.startswith(HOST_PREFIX):
            name = name[len(HOST_PREFIX):]
        if "." in name:
            raise ExpressionError(f"attribute access is not allowed: {tok.text!r}", tok.pos)

        if self.tok.kind == "lparen":
            if name not in FUNCTIONS:
                raise ExpressionError(f"unknown function {tok.text!r}", tok.pos)
            self.advance()
            args = self.args()
            builder, arities = FUNCTIONS[name]
            if len(args) not in arities:
                raise ExpressionError(f"{name}() takes {' or '.join(map(str, arities))} argument(s)", tok.pos)
            return builder(*args)

        if name == VARIABLE:
            return n
        if name in CONSTANTS:
            return CONSTANTS[name]
        raise ExpressionError(f"unknown name {tok.text!r}", tok.pos)

    def args(self):
        args = []
        if self.tok.kind == "rparen":
            self.advance()
            return args
        while True:
            args.append(self.expr())
            if self.tok.kind == "comma":
                self.advance()
                continue
            self.expect("rparen", "')' or ','")
            return args


def parse(text: str) -> sp.Expr:
    """Parse ``text`` into a SymPy expression in ``n``.

    Raises ExpressionError for anything outside the grammar.
    """
    try:
        expr = _Parser(text).parse()
    except (ArithmeticError, TypeError, ValueError) as e:
        # SymPy itself can refuse a construct, e.g. float() of a huge literal
        raise ExpressionError(f"could not build expression: {e}") from e
    if expr.has(sp.zoo, sp.nan):
        raise ExpressionError("expression is undefined")
    return expr


# --------------------------
# Numeric evaluation
# --------------------------
def sanitize(values, shape) -> np.ndarray:
    """Broadcast to ``shape`` as float64, mapping inf/complex/NaN to NaN."""
    arr = np.asarray(values)
    if np.iscomplexobj(arr):
        arr = np.where(np.abs(arr.imag) < 1e-12, arr.real, np.nan)
    arr = np.broadcast_to(np.asarray(arr, dtype=float), shape).copy()
    arr[~np.isfinite(arr)] = np.nan
    return arr


@dataclass(frozen=True)
class CompiledExpression:
    text: str
    expr: sp.Expr
    func: Callable

    def sample(self, ns) -> np.ndarray:
        """Evaluate at every n in ``ns``; failures become NaN."""
        ns = np.asarray(ns, dtype=float)
        with np.errstate(all="ignore"):
            try:
                return sanitize(self.func(ns), ns.shape)
            except (ArithmeticError, TypeError, ValueError) as e:
                log.debug("vectorised evaluation of %r failed (%s), sampling pointwise", self.text, e)
            out = np.full(ns.shape, np.nan)
            for i, value in np.ndenumerate(ns):
                try:
                    out[i] = sanitize(self.func(value), ())
                except (ArithmeticError, TypeError, ValueError):
                    pass
            return out


@lru_cache(maxsize=128)
def compile_expression(text: str) -> CompiledExpression:
    expr = parse(text)
    try:
        func = sp.lambdify(n, expr, modules=[{"factorial": np_factorial_safe}, "numpy"])
    except (ArithmeticError, TypeError, ValueError) as e:
        raise ExpressionError(f"could not compile expression: {e}") from e
    log.debug("compiled %r -> %s", text, expr)
    return CompiledExpression(text, expr, func)


def sample_expression(text: str, ns) -> np.ndarray:
    """Sample ``text`` over ``ns``; an unparseable expression is NaN everywhere."""
    ns = np.asarray(ns, dtype=float)
    try:
        compiled = compile_expression(text)
    except ExpressionError as e:
        log.debug("cannot evaluate %r: %s", text, e)
        return np.full(ns.shape, np.nan)
    return compiled.sample(ns)


def evaluate(text: str, value: int) -> float:
    """Value of ``text`` at n=``value``, or NaN when it cannot be evaluated."""
    return float(sample_expression(text, [value])[0])
