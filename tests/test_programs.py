import builtins

import pytest

from genz.interpreter import run_program


def run_example(example_source, name):
    return run_program(example_source(name))


def test_program_1_hello_world(example_source, capsys):
    run_example(example_source, 'program_1.genz')
    assert capsys.readouterr().out == 'Hello World!!\n'


def test_program_2_declarations(example_source, capsys):
    run_example(example_source, 'program_2.genz')
    assert capsys.readouterr().out.splitlines() == ['17', '2.5', 'Jess', 'nil', '2.5']


def test_program_3_block_shadowing(example_source, capsys):
    interpreter = run_example(example_source, 'program_3.genz')
    assert capsys.readouterr().out.splitlines() == ['2', '1']
    assert interpreter.global_env.get('x') == 1


@pytest.mark.parametrize('answer, expected', [('21', 'adult'), ('18', 'adult'), ('12', 'minor'), ('', 'minor')])
def test_program_4_branch_on_input(example_source, capsys, monkeypatch, answer, expected):
    prompts = []

    def fake_input(prompt=''):
        prompts.append(prompt)
        return answer

    monkeypatch.setattr(builtins, 'input', fake_input)
    run_example(example_source, 'program_4.genz')
    assert prompts == ['How old are you? ']
    assert capsys.readouterr().out == expected + '\n'


def test_program_5_assignment_reaches_outer_scope(example_source, capsys):
    interpreter = run_example(example_source, 'program_5.genz')
    assert capsys.readouterr().out.splitlines() == [
        '2',
        "[line 8] Runtime error: Undefined variable 'label'.",
    ]
    assert interpreter.global_env.get('count') == 2


def test_program_6_operators(example_source, capsys):
    run_example(example_source, 'program_6.genz')
    assert capsys.readouterr().out.splitlines() == [
        '7', '9', '512', '-4', '3', 'genz', 'false', 'true', 'true', 'true', 'false', 'z',
    ]
