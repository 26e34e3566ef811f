"""
Shared fixtures: a small vf-graphql style schema.
"""

import textwrap

import pytest
from pathlib import Path

from hrea_docs.schema import build_schema


SCHEMA_SDL = '''
"""
A person or group or organization with economic agency.
"""
type Agent {
  id: ID!
  name: String!
}

"""
An observed economic flow, as opposed to a flow planned to happen in the future.
"""
type EconomicEvent {
  id: ID!
}

"""
A resource which is useful to people or the ecosystem.
"""
type EconomicResource {
  id: ID!
}

type Unit {
  id: ID!
}

type Query {
  "Find an agent by ID"
  agent(id: ID!): Agent
  agents: [Agent!]
  "Find an economic event by ID"
  economicEvent(id: ID!): EconomicEvent
  economicEvents: [EconomicEvent!]
  economicResource(id: ID!): EconomicResource
  "Find a unit by ID"
  unit(id: ID!): Unit
  "A resolver declared as a variable"
  baz: Int
}

type Mutation {
  "Create an economic event"
  createEconomicEvent(note: String): EconomicEvent
  deleteEconomicEvent(id: ID!): Boolean
  createUnit(label: String!): Unit
}
'''

EXTENSION_SDL = '''
extend type Query {
  "Loads details of the currently authenticated agent"
  myAgent: Agent
}
'''


def write(path: Path, content: str) -> Path:
    """Write dedented content, creating parent folders."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(textwrap.dedent(content).lstrip(), encoding="utf-8")
    return path


@pytest.fixture
def schema_dir(tmp_path):
    """Folder with the base schema and an extension file next to it."""
    schemas = tmp_path / "schemas"
    write(schemas / "core.gql", SCHEMA_SDL)
    write(tmp_path / "extensions" / "associate-my-agent.gql", EXTENSION_SDL)
    return schemas


@pytest.fixture
def schema(schema_dir):
    return build_schema([schema_dir], [schema_dir.parent / "extensions"])


@pytest.fixture
def write_file():
    return write
