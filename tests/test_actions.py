"""User code embedding and $/@ reference translation."""

from __future__ import annotations

import pytest

from conftest import make_grammar_and_context
from skelgen.codegen.actions import symbol_actions_for_printer, user_actions
from skelgen.grammar.ast import Rule, Symbol
from skelgen.grammar.code import PRINTER, Code


class TestCode:
    @pytest.mark.parametrize("line, column", [(0, 1), (1, 0), (-3, 2)])
    def test_rejects_non_positive_position(self, line, column):
        with pytest.raises(ValueError):
            Code("{ }", line=line, column=column)

    def test_action_references(self):
        code = Code("{ $$ = $1 + $3; @$ = @1; }", line=1)
        assert code.translated_code(None, [None, None, None]) == \
            "{ (yyval) = (yyvsp[-2]) + (yyvsp[0]); (yyloc) = (yylsp[-2]); }"

    def test_action_references_with_tags(self):
        code = Code("{ $$ = $1 + $<dval>3; }", line=1)
        assert code.translated_code("ival", ["ival", None, "ival"]) == \
            "{ (yyval.ival) = (yyvsp[-2].ival) + (yyvsp[0].dval); }"

    def test_printer_references(self):
        code = Code('{ printf ("%d", $$); }', line=1, kind=PRINTER)
        assert code.translated_code("ival") == '{ printf ("%d", ((*yyvaluep).ival)); }'
        assert code.translated_code() == '{ printf ("%d", (*yyvaluep)); }'

    def test_printer_rejects_positional_reference(self):
        with pytest.raises(ValueError):
            Code("{ $1; }", line=1, kind=PRINTER).translated_code()

    def test_plain_dollar_is_untouched(self):
        code = Code('{ puts ("$x"); }', line=1)
        assert code.translated_code() == '{ puts ("$x"); }'


class TestUserActions:
    def test_rule_with_action(self):
        grammar, _ = make_grammar_and_context()
        text = user_actions(grammar.rules, "calc.y")

        assert text == (
            "  case 2: /* expr: expr '+' NUM  */\n"
            '#line 12 "calc.y"\n'
            "                 { (yyval.ival) = (yyvsp[-2].ival) + (yyvsp[0].ival); }\n"
            "#line [@oline@] [@ofile@]\n"
            "    break;\n"
            "\n"
            "\n"
            "#line [@oline@] [@ofile@]\n"
        )

    def test_no_actions_keeps_wrapper(self):
        grammar, _ = make_grammar_and_context(with_actions=False)
        assert user_actions(grammar.rules, "calc.y") == "\n#line [@oline@] [@ofile@]\n"

    def test_rules_emitted_in_id_order(self):
        lhs = Symbol(5, "s", "YYSYMBOL_s", term=False)
        rules = [
            Rule(3, lhs, code=Code("{ c; }", line=30)),
            Rule(1, lhs, code=Code("{ a; }", line=10)),
            Rule(2, lhs),
        ]
        text = user_actions(rules, "g.y")

        assert text.index("case 2:") < text.index("case 4:")
        assert "case 3:" not in text
        assert "/* s: %empty  */" in text

    def test_multiline_code_keeps_relative_indent(self):
        lhs = Symbol(5, "s", "YYSYMBOL_s", term=False)
        code = Code("{\n      x ();\n    }", line=4, column=5)
        text = user_actions([Rule(1, lhs, code=code)], "g.y")
        assert "\n    {\n      x ();\n    }\n" in text

    def test_grammar_path_is_escaped(self):
        grammar, _ = make_grammar_and_context()
        text = user_actions(grammar.rules, 'dir\\"odd".y')
        assert '#line 12 "dir\\\\\\"odd\\".y"' in text


class TestPrinterActions:
    def test_symbols_with_printer(self):
        grammar, _ = make_grammar_and_context()
        text = symbol_actions_for_printer(grammar.symbols, "calc.y")

        assert text == (
            "    case YYSYMBOL_NUM: /* NUM  */\n"
            '#line 9 "calc.y"\n'
            '         { fprintf (yyo, "%d", ((*yyvaluep).ival)); }\n'
            "#line [@oline@] [@ofile@]\n"
            "        break;\n"
            "\n"
        )

    def test_no_printers_emit_nothing(self):
        grammar, _ = make_grammar_and_context(with_printer=False)
        assert symbol_actions_for_printer(grammar.symbols, "calc.y") == ""
