"""
Tests for integer grid properties.
"""

import numpy as np
import pytest

from grid import GridProperties, IntGridProperty


class TestIntGridProperty:

    def test_flatten_and_max(self):
        prop = IntGridProperty("EQLNUM", np.array([[1, 2], [4, 0]]))
        assert len(prop) == 4
        assert prop.max_value() == 4

    def test_read_only(self):
        prop = IntGridProperty("EQLNUM", [1, 2, 3])
        with pytest.raises(ValueError):
            prop.data[0] = 7

    def test_copy_on_input(self):
        src = np.array([1, 2, 3])
        prop = IntGridProperty("EQLNUM", src)
        src[0] = 99
        assert prop.max_value() == 3

    def test_rejects_empty_and_float(self):
        with pytest.raises(ValueError):
            IntGridProperty("EQLNUM", [])
        with pytest.raises(ValueError):
            IntGridProperty("EQLNUM", np.array([1.0, 2.5]))


class TestGridProperties:

    def test_has_get(self):
        props = GridProperties({"EQLNUM": [1, 1, 2]})
        assert props.has_int_grid_property("EQLNUM")
        assert not props.has_int_grid_property("FIPNUM")
        assert props.get_int_grid_property("EQLNUM").max_value() == 2
        with pytest.raises(KeyError):
            props.get_int_grid_property("FIPNUM")

    def test_add_instance(self):
        props = GridProperties()
        prop = IntGridProperty("FIPNUM", [3])
        assert props.add("FIPNUM", prop) is prop
        assert props.get_int_grid_property("FIPNUM") is prop
