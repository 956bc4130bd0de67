#!/usr/bin/env python
# -*- coding: utf-8 -*-

""" tabfile.core module """

from .tab_config import TabConfig, TabConfigException
from .tab_record import TabRecord, field_ranges
from .tab_filter import TabLineFilter
from .tab_file import TabFile, TabFileException, TabFileReadError
from .tab_iterator import TabRowIterator, TabItem
from .tab_multi_file import TabMultiFile
from .tab_operator import TabOperator
from .tab_pandas import to_pandas
from .tab_open import tab_open
