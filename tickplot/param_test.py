#! /usr/bin/env python3

import pytest

from . import errors
from . import param

def test_update():
    style = param.update({})
    assert(style['bg_col'] == 'transparent')

    style = param.update({}, param.ROOT)
    assert(style['bg_col'] == 'white')
    assert(style['axis_tick_count'] == 5)

    with pytest.raises(ValueError):
        # 'axis_col' must be inherited, but there is no parent
        param.update({}, {'bg_col': 'red'})

    child = param.update({'axis_tick_count_x': 3},
                         parent_style=param.update(param.ROOT))
    assert child['axis_tick_count'] == 5
    assert child['axis_tick_count_x'] == 3
    assert child['axis_tick_count_y'] == '$axis_tick_count'

def test_check_keys():
    assert param.check_keys(None) == {}
    style = {'lw': '1pt'}
    assert param.check_keys(style) is style
    with pytest.raises(errors.InvalidParameterName):
        param.check_keys({'line.width': '1pt'})

def test_merge():
    style = param.merge({'lw': '1pt'}, None, {'lw': '2pt'}, bar_width=.5)
    assert style == {'lw': '2pt', 'bar_width': .5}

    parent = param.update(param.ROOT)
    style = param.merge({'axis_col': 'inherit'}, parent_style=parent)
    assert style['axis_col'] == param.ROOT['axis_col']

    with pytest.raises(ValueError):
        param.merge({'axis_col': 'inherit'})
    with pytest.raises(errors.InvalidParameterName):
        param.merge({'fish': 1})

def test_defaults():
    types = {'col', 'cols', 'dim', 'width', 'height', 'bool', 'int', 'num',
             'dash', 'str'}
    for key, (t, _, desc) in param.DEFAULT.items():
        assert t in types, key
        assert desc, key
    for key in param.ROOT:
        assert key in param.VALID_KEYS
