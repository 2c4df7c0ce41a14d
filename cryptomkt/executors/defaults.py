"""Default executor configuration.

This module defines the default HTTP executor implementation used by the
CryptoMkt SDK when no custom executor is provided.
"""

from typing import Type

from cryptomkt.executors.httpx import HttpxHttpExecutor
from cryptomkt.executors.interface import HttpExecutor

DEFAULT_HTTP_EXECUTOR: Type[HttpExecutor] = HttpxHttpExecutor
