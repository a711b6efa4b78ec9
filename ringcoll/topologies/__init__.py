# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

from .topology import Topology, check_ring
from .generic import ring, line
from .transformers import reverse_topology
