"""Operations — business-logic units returning a Result.

Invariants:
    - Every operation is an async callable: await operation(**input) -> Result
    - Each operation declares its name, optional resource and InputShape
    - Registration is explicit (operations/registry.py)
"""
