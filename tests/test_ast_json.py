import json

import pytest

from genz.ast import GHOSTED
from genz.ast_json import ast_from_obj, program_from_obj, program_to_obj
from genz.interpreter import Interpreter, parse_program


def test_program_survives_json(example_source, capsys):
    statements = parse_program(example_source('program_6.genz'))
    obj = json.loads(json.dumps(program_to_obj(statements)))
    assert obj['type'] == 'Program'
    restored = program_from_obj(obj)
    assert restored == statements

    Interpreter().run(restored)
    assert capsys.readouterr().out.splitlines()[:3] == ['7', '9', '512']


def test_node_shapes():
    [decl, block] = parse_program('tea $x as ghosted : spill $x end')
    obj = program_to_obj([decl, block])['body']
    assert obj[0]['type'] == 'VarDecl'
    assert obj[0]['sigil'] == '$'
    assert obj[0]['name'] == {'type': 'IDENTIFIER', 'lexeme': 'x', 'literal': None, 'line': 1}
    assert obj[0]['initializer'] == {'type': 'Ghosted'}
    assert obj[1]['statements'][0]['expression']['token']['lexeme'] == '$x'
    assert ast_from_obj(obj[0]['initializer']) is GHOSTED


def test_rejects_unknown_input():
    with pytest.raises(ValueError):
        program_from_obj({'type': 'Module', 'body': []})
    with pytest.raises(ValueError):
        ast_from_obj({'type': 'While'})
