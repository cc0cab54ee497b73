# SPDX-License-Identifier: MIT

import uuid
from typing import TypeAlias

# Stored ids are uuid4 strings. Items and check-ins also get short synthetic
# ids for the command line, see recheck.repository.id_map.
EntityId: TypeAlias = str


def generate_entity_id() -> EntityId:
    return str(uuid.uuid4())
