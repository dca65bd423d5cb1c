"""PEG grammar for the pest grammar meta-syntax.

Translated from pest_meta's grammar.pest to parsimonious (Python) format.

In pest, WHITESPACE and COMMENT are auto-inserted between tokens in non-atomic
rules. In parsimonious, whitespace must be explicit. Strategy:
  - `_` (optional whitespace, line comments and nested block comments) is
    inserted between every pair of tokens
  - line comments never start with `///` or `//!`; those are doc comments
  - atomic tokens (identifier, string, character, number) are single regexes

Rule names that match a PairKind value become nodes of the parse tree; every
other rule is transparent. This grammar is used by parsers/pest.py.
"""

GRAMMAR = r"""
grammar_rules        = _ (grammar_doc _)* (grammar_rule _)*

grammar_rule         = rule_definition / line_doc
rule_definition      = identifier _ assignment_operator _ modifier? _ opening_brace _ expression _ closing_brace

modifier             = silent_modifier / atomic_modifier / compound_atomic_modifier / non_atomic_modifier
silent_modifier      = "_"
atomic_modifier      = "@"
compound_atomic_modifier = "$"
non_atomic_modifier  = "!"

expression           = (choice_operator _)? term (_ infix_operator _ term)*
infix_operator       = sequence_operator / choice_operator
sequence_operator    = "~"
choice_operator      = "|"

term                 = (node_tag _)? (prefix_operator _)* node (_ postfix_operator)*
node_tag             = tag_id _ assignment_operator
tag_id               = ~r"#[A-Za-z_][A-Za-z0-9_]*"

node                 = parenthesized / terminal
parenthesized        = opening_paren _ expression _ closing_paren
terminal             = push / peek_slice / identifier / string / insensitive_string / range

prefix_operator      = positive_predicate_operator / negative_predicate_operator
positive_predicate_operator = "&"
negative_predicate_operator = "!"

postfix_operator     = optional_operator / repeat_operator / repeat_once_operator / repeat_min_max / repeat_exact / repeat_min / repeat_max
optional_operator    = "?"
repeat_operator      = "*"
repeat_once_operator = "+"
repeat_exact         = opening_brace _ number _ closing_brace
repeat_min           = opening_brace _ number _ comma _ closing_brace
repeat_max           = opening_brace _ comma _ number _ closing_brace
repeat_min_max       = opening_brace _ number _ comma _ number _ closing_brace

push                 = "PUSH" _ opening_paren _ expression _ closing_paren
peek_slice           = "PEEK" _ opening_brack _ integer? _ range_operator _ integer? _ closing_brack

identifier           = ~r"(?!PUSH)[A-Za-z_][A-Za-z0-9_]*"
string               = ~r'"(?:[^"\\]|\\.)*"'
insensitive_string   = "^" _ string
range                = character _ range_operator _ character
character            = ~r"'(?:\\u\{[0-9A-Fa-f]{2,6}\}|\\.|[^'\\])'"
number               = ~r"[0-9]+"
integer              = ~r"-?[0-9]+"

assignment_operator  = "="
opening_brace        = "{"
closing_brace        = "}"
opening_paren        = "("
closing_paren        = ")"
opening_brack        = "["
closing_brack        = "]"
comma                = ","
range_operator       = ".."

grammar_doc          = ~r"//![^\n\r]*"
line_doc             = ~r"///[^\n\r]*"

_                    = (whitespace / block_comment / line_comment)*
whitespace           = ~r"[ \t\r\n]+"
line_comment         = ~r"//(?![/!])[^\n\r]*"
block_comment        = "/*" (block_comment / ~r"[^*/]+" / ~r"\*(?!/)" / ~r"/(?!\*)")* "*/"
"""
