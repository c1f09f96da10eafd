from .models import (
    ConnectStatement,
    DeclareStatement,
    PortRef,
    Statement,
    parse_statement,
    parse_statements,
)

__all__ = [
    "ConnectStatement",
    "DeclareStatement",
    "PortRef",
    "Statement",
    "parse_statement",
    "parse_statements",
]
