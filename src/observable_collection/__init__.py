# Copyright (c) 2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

import logging

from ._sentinel import MaybeUndefined, Undefined, UndefinedType, is_undefined
from .collection import ObservableCollection
from .config import CollectionSettings, configure_logging, settings
from .emitter import Emitter, Listener
from .enumerable import Cursor, Traversable, iterate
from .errors import CollectionError, ListenerRegistrationError
from .version import __version__

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())

__all__ = (
    "__version__",
    "CollectionError",
    "CollectionSettings",
    "Cursor",
    "Emitter",
    "Listener",
    "ListenerRegistrationError",
    "MaybeUndefined",
    "ObservableCollection",
    "Traversable",
    "Undefined",
    "UndefinedType",
    "configure_logging",
    "is_undefined",
    "iterate",
    "logger",
    "settings",
)
