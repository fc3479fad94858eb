"""
Connectives, conditionals and coercion for three-valued logic.

Submodules: ternary (True/False/None), balanced (-1/0/1 trits),
vector (numpy trit arrays) and coercion (arbitrary values to ternary).
"""
