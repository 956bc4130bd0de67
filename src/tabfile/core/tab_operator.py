#!/usr/bin/env python
# encoding: utf-8

from typing import Callable, Any

from .tab_record import TabRecord


class TabOperator:
    """ Easily define filter criteria

    Examples:
    rtn = it.filter(op(3) == "F")
    rtn = it.filter(op(3).strip().lower() == "f")
    rtn = it.filter(op(1).int() > 1990)
    """

    def __init__(self, index: int, func: None|Callable[[str], Any]=None):
        self.index = index
        self.func: Callable[[str], Any] = func if func is not None else lambda x: x

    def get(self, rec: TabRecord) -> Any:
        """ Apply the function to the field's value. Records with too few
        fields provide None """
        try:
            value = rec.field(self.index)
        except IndexError:
            return None

        return self.func(value)

    def __eq__(self, other):
        return lambda rec: self.get(rec) == other

    def __ne__(self, other):
        return lambda rec: self.get(rec) != other

    def __gt__(self, other):
        return lambda rec: _compare(self.get(rec), other, lambda a, b: a > b)

    def __lt__(self, other):
        return lambda rec: _compare(self.get(rec), other, lambda a, b: a < b)

    def __ge__(self, other):
        return lambda rec: _compare(self.get(rec), other, lambda a, b: a >= b)

    def __le__(self, other):
        return lambda rec: _compare(self.get(rec), other, lambda a, b: a <= b)

    def is_in(self, other):
        """ Apply the 'in' operator to the field's value """
        return lambda rec: self.get(rec) in other

    def is_notin(self, other):
        """ Apply the 'not in' operator to the field's value """
        return lambda rec: self.get(rec) not in other

    def is_empty(self):
        """ True, if the field is missing or an empty string """
        return lambda rec: not self.get(rec)

    def strip(self):
        """ Strip the field's value """
        orig = self.func
        self.func = lambda x: orig(x).strip()
        return self

    def lower(self):
        """ Convert the field's value to lowercase """
        orig = self.func
        self.func = lambda x: orig(x).lower()
        return self

    def upper(self):
        """ Convert the field's value to uppercase """
        orig = self.func
        self.func = lambda x: orig(x).upper()
        return self

    def int(self):
        """ Convert the field's value into an integer """
        orig = self.func
        self.func = lambda x: int(orig(x))
        return self

    def float(self):
        """ Convert the field's value into a float """
        orig = self.func
        self.func = lambda x: float(orig(x))
        return self


def _compare(value, other, func) -> bool:
    # Missing fields never match an ordering
    if value is None:
        return False

    return func(value, other)
