from __future__ import annotations
from typing import List, Optional

# Lexer + shunting-yard producing postfix token strings for polynomial expressions
class Tok:
	def __init__(self, kind: str, lex: str = ""):
		self.kind, self.lex = kind, lex
	def __repr__(self) -> str:
		return f"Tok({self.kind!r}, {self.lex!r})"

BINARY_OPERATORS = ("+", "-", "*", "/")
prec = {'+': 1, '-': 1, '*': 2, '/': 2}
# kinds after which an operand or '(' means an implicit '*'
_OPERAND_END = ('ID', 'NUM', ')', 'POW')

def _read_number(s: str, i: int) -> int:
	j, n = i, len(s)
	has_dot = False
	while j < n and (s[j].isdigit() or (s[j] == '.' and not has_dot)):
		has_dot = has_dot or s[j] == '.'
		j += 1
	return j

def _read_exponent(s: str, i: int) -> tuple[str, int]:
	# i points just after '^'; accepts 2, -1, 1.5, (3), (-2)
	n = len(s)
	while i < n and s[i].isspace():
		i += 1
	wrapped = i < n and s[i] == '('
	if wrapped:
		i += 1
	start = i
	if i < n and s[i] in '+-':
		i += 1
	j = _read_number(s, i)
	if j == i or s[i:j] == '.':
		raise ValueError(f"Exponent must be a number at position {start}")
	exp = s[start:j]
	if wrapped:
		if j >= n or s[j] != ')':
			raise ValueError("Mismatched parens")
		j += 1
	return exp, j

def _fold_exponents(chain: List[str]) -> int:
	if not all(e.isdigit() for e in chain):
		raise ValueError("Chained exponents must be non-negative integers")
	v = int(chain[-1])
	for e in reversed(chain[:-1]):
		v = int(e) ** v
	return v

def tokenize(expr: str) -> List[Tok]:
	s = expr
	i, n = 0, len(s)
	toks: List[Tok] = []
	prev: Optional[Tok] = None
	chain: List[str] = []
	def implicit_mul() -> None:
		if prev and prev.kind in _OPERAND_END:
			toks.append(Tok('*', '*'))
	while i < n:
		c = s[i]
		if c.isspace():
			i += 1; continue
		if c == '^':
			if prev is None or prev.kind not in _OPERAND_END:
				raise ValueError(f"Power without a base at position {i}")
			exp, i = _read_exponent(s, i + 1)
			if prev.kind == 'POW':
				# x^a^b is x^(a^b)
				chain.append(exp)
				toks[-1] = Tok('POW', f"^{_fold_exponents(chain)}")
			else:
				chain = [exp]
				toks.append(Tok('POW', f"^{exp}"))
			prev = toks[-1]; continue
		if c in "+-" and (prev is None or prev.kind in BINARY_OPERATORS or prev.kind == '('):
			# unary sign
			i += 1
			if c == '-':
				toks.append(Tok('NUM', '-1'))
				toks.append(Tok('*', '*'))
				prev = toks[-1]
			continue
		if c in "+-*/()":
			if c == '(':
				implicit_mul()
			toks.append(Tok(c, c))
			prev = toks[-1]
			i += 1; continue
		if c.isdigit() or c == '.':
			j = _read_number(s, i)
			if j == i or s[i:j] == '.':
				raise ValueError(f"Unexpected char {c}")
			# n/d literal, kept as a single operand
			if '.' not in s[i:j] and j + 1 < n and s[j] == '/' and s[j + 1].isdigit():
				k = j + 1
				while k < n and s[k].isdigit():
					k += 1
				j = k
			implicit_mul()
			toks.append(Tok('NUM', s[i:j]))
			i = j; prev = toks[-1]; continue
		if c.isalpha():
			# "xy" is x*y
			implicit_mul()
			toks.append(Tok('ID', c))
			i += 1; prev = toks[-1]; continue
		raise ValueError(f"Unexpected char {c}")
	return toks

def to_rpn(toks: List[Tok]) -> List[str]:
	out: List[str] = []
	op: List[Tok] = []
	for t in toks:
		if t.kind in ('NUM', 'ID'):
			out.append(t.lex)
		elif t.kind == 'POW':
			# postfix and binds tightest: its operand is already complete
			out.append(t.lex)
		elif t.kind in prec:
			while op and op[-1].kind != '(' and prec[t.kind] <= prec[op[-1].kind]:
				out.append(op.pop().lex)
			op.append(t)
		elif t.kind == '(':
			op.append(t)
		elif t.kind == ')':
			while op and op[-1].kind != '(':
				out.append(op.pop().lex)
			if not op: raise ValueError("Mismatched parens")
			op.pop()
		else:
			raise ValueError("Unknown token kind")
	while op:
		if op[-1].kind == '(': raise ValueError("Mismatched parens")
		out.append(op.pop().lex)
	return out

class ShuntingYard:
	"""Turns an algebraic string into postfix tokens.

	Operands are passed through as their literal text ('3', '1/2', '0.5', 'x',
	'-1'); operators are '+', '-', '*', '/' and powers '^k'.
	"""
	def __init__(self) -> None:
		self.tokens: List[Tok] = []
		self.rpn: List[str] = []
	def parse(self, expr: str) -> ShuntingYard:
		self.tokens = tokenize(expr)
		self.rpn = to_rpn(self.tokens)
		return self
	@staticmethod
	def is_operation(token: str) -> bool:
		return token in BINARY_OPERATORS or token.startswith('^')
