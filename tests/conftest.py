"""Shared fixtures: a tiny `expr: expr '+' NUM | NUM` grammar and its tables."""

from __future__ import annotations

import pytest

from skelgen.grammar.ast import Grammar, Rule, Symbol
from skelgen.grammar.code import PRINTER, Code
from skelgen.lalr.table import AnalysisContext

GRAMMAR_PATH = "calc.y"


def _symbols(with_printer: bool = True) -> dict[str, Symbol]:
    num_printer = Code('{ fprintf (yyo, "%d", $$); }', line=9, column=10, kind=PRINTER) if with_printer else None
    return {
        "eof": Symbol(0, "YYEOF", "YYSYMBOL_YYEOF", comment='"end of file"'),
        "error": Symbol(1, "error", "YYSYMBOL_YYerror", comment="error"),
        "undef": Symbol(2, "YYUNDEF", "YYSYMBOL_YYUNDEF", comment='"invalid token"'),
        "num": Symbol(3, "NUM", "YYSYMBOL_NUM", comment="NUM", tag="ival", printer=num_printer),
        "plus": Symbol(4, "'+'", "YYSYMBOL_4_", comment="'+'"),
        "accept": Symbol(5, "$accept", "YYSYMBOL_YYACCEPT", comment="$accept", term=False),
        "expr": Symbol(6, "expr", "YYSYMBOL_expr", comment="expr", tag="ival", term=False),
    }


def make_grammar_and_context(*, with_actions: bool = True, with_printer: bool = True,
                             parse_param: str | None = None):
    s = _symbols(with_printer)
    action = Code("{ $$ = $1 + $3; }", line=12, column=18) if with_actions else None
    rules = [
        Rule(0, s["accept"], [s["expr"], s["eof"]]),
        Rule(1, s["expr"], [s["expr"], s["plus"], s["num"]], code=action),
        Rule(2, s["expr"], [s["num"]]),
    ]
    grammar = Grammar(
        eof_symbol=s["eof"],
        error_symbol=s["error"],
        undef_symbol=s["undef"],
        accept_symbol=s["accept"],
        symbols=list(s.values()),
        rules=rules,
        parse_param=parse_param,
        prologue=Code("#include <stdio.h>\nint yylex (void);\nvoid yyerror (const char *);", line=2),
        union_code=Code("  int ival;", line=6),
        aux=Code("int main (void) { return yyparse (); }", line=16),
    )

    translate = [0] + [2] * 255 + [1, 2, 3]
    translate[43] = 4
    context = AnalysisContext(
        yyfinal=3, yylast=5, yyntokens=5, yynnts=2, yynrules=3, yynstates=7,
        yymaxutok=258, yypact_ninf=-3, yytable_ninf=-1,
        yytokentype=[
            ("YYEMPTY", -2, None),
            ("YYEOF", 0, '"end of file"'),
            ("YYerror", 256, "error"),
            ("YYUNDEF", 257, '"invalid token"'),
            ("NUM", 258, None),
        ],
        yysymbol_kind_t=[
            ("YYSYMBOL_YYEMPTY", -2, None),
            ("YYSYMBOL_YYEOF", 0, '"end of file"'),
            ("YYSYMBOL_YYerror", 1, "error"),
            ("YYSYMBOL_YYUNDEF", 2, '"invalid token"'),
            ("YYSYMBOL_NUM", 3, "NUM"),
            ("YYSYMBOL_4_", 4, "'+'"),
            ("YYSYMBOL_YYACCEPT", 5, "$accept"),
            ("YYSYMBOL_expr", 6, "expr"),
        ],
        rules=rules,
        yytranslate=translate,
        yyrline=[0, 12, 13],
        yytname=['"end of file"', "error", '"invalid token"', "NUM", "'+'", "$accept", "expr"],
        yypact=[-2, -3, 0, -3, 1, -3, -3],
        yydefact=[0, 2, 0, 1, 0, 3, 0],
        yypgoto=[-3, -3],
        yydefgoto=[0, 2],
        yytable=[3, 4, 1, 5, 0, 6],
        yycheck=[0, 4, 3, 3, -1, 3],
        yystos=[0, 3, 6, 0, 4, 3, 0],
        yyr1=[0, 5, 6, 6],
        yyr2=[0, 2, 3, 1],
    )
    return grammar, context


@pytest.fixture
def grammar_and_context():
    return make_grammar_and_context()
