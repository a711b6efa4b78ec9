# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

from .run import make_handle_run
from .algorithms import make_algorithms
