"""
hREA Docs — Integration Tests

Tests the full cycle: Config → Schema → Scan → Aggregate → Render
"""

import pytest
from pathlib import Path

from hrea_docs.cli import main


@pytest.fixture
def hrea_checkout(tmp_path, schema_dir, write_file):
    """
    Create a miniature hREA checkout plus docs folder.

    Structure:
        vf-graphql-holochain/
        ├── queries/
        │   ├── index.ts             # skipped
        │   ├── agent.ts             # mix of stubs and real resolvers
        │   ├── economicEvent.ts
        │   └── unit.ts
        └── mutations/
            ├── index.ts
            ├── economicEvent.ts
            └── unit.ts
        schemas/core.gql
        extensions/associate-my-agent.gql
        hrea-docs.yaml
    """
    holochain = tmp_path / "vf-graphql-holochain"

    write_file(holochain / "queries" / "index.ts", """
        import Agent from './agent.js'
        export { Agent }
    """)
    write_file(holochain / "queries" / "agent.ts", """
        import { DNAIdMappings, injectTypename } from '../types.js'
        import { mapZomeFn } from '../connection.js'

        export default (dnaConfig: DNAIdMappings, conductorUri: string) => {
          const readMyAgent = mapZomeFn(dnaConfig, conductorUri, 'agent', 'agent', 'get_my_agent')

          const myAgent = injectTypename('Person', async (root, args) => {
            return readMyAgent(null)
          })

          return {
            myAgent,
            agent: async (root, args) => {
              throw new Error('query unimplemented')
            },
            agents: async (root, args) => {
              throw new Error('query unimplemented')
            },
          }
        }
    """)
    write_file(holochain / "queries" / "economicEvent.ts", """
        export default (dnaConfig, conductorUri) => {
          const readOne = mapZomeFn(dnaConfig, conductorUri, 'observation', 'economic_event_index', 'read_economic_event')

          return {
            economicEvent: async (root, args) => {
              return (await readOne({ address: args.id })).economicEvent
            },
            economicEvents: async () => {
              throw new Error('query unimplemented')
            },
          }
        }
    """)
    write_file(holochain / "queries" / "unit.ts", """
        export default (dnaConfig, conductorUri) => {
          const unit = async (root, args) => {
            return readUnit(args)
          }
          return { unit }
        }
    """)
    write_file(holochain / "mutations" / "index.ts", "export * from './unit.js'\n")
    write_file(holochain / "mutations" / "economicEvent.ts", """
        export default (dnaConfig, conductorUri) => {
          const createEconomicEvent = injectTypename('EconomicEvent', async (root, args) => {
            return runCreate(args)
          })

          return {
            createEconomicEvent,
            deleteEconomicEvent: () => { throw new Error('mutation unimplemented') },
          }
        }
    """)
    write_file(holochain / "mutations" / "unit.ts", """
        export default (dnaConfig, conductorUri) => {
          return {
            createUnit: async (root, args) => {
              return runCreate(args)
            },
          }
        }
    """)

    write_file(tmp_path / "hrea-docs.yaml", """
        paths:
          resolvers: vf-graphql-holochain
          output: docs/reference
        schema:
          files: [schemas]
          extensions: [extensions/associate-my-agent.gql]
        modules:
          agent: [agent]
          observation: [economicEvent, economicResource]
          measurement: [unit]
          util: []
          pagination: []
    """)
    return tmp_path


def generate(checkout: Path, *extra: str) -> int:
    return main(["generate", "--config", str(checkout / "hrea-docs.yaml"), *extra])


class TestGenerate:
    """Test the generate command end to end."""

    def test_writes_one_page_per_module(self, hrea_checkout):
        """Should write agent, observation and measurement pages only."""
        assert generate(hrea_checkout) == 0

        pages = sorted(p.name for p in (hrea_checkout / "docs" / "reference").iterdir())
        assert pages == ["agent.md", "measurement.md", "observation.md"], \
            "util and pagination should get no page"

    def test_agent_page(self, hrea_checkout):
        """Should mark stubs unimplemented and wrapped resolvers implemented."""
        generate(hrea_checkout)

        text = (hrea_checkout / "docs" / "reference" / "agent.md").read_text(encoding="utf-8")

        assert text.startswith("# Agent\n\n## Classes\n\n### `Agent`\n\n")
        assert "A person or group or organization with economic agency." in text
        assert (
            "### `myAgent`\n"
            "Loads details of the currently authenticated agent\n"
            "> Status: Implemented\n\n"
        ) in text
        assert "### `agent`\nFind an agent by ID\n> Status: Unimplemented\n\n" in text
        assert "### `agents`\n\n> Status: Unimplemented\n\n" in text
        assert text.endswith("## Mutations\n\n")

    def test_observation_page_skips_missing_files(self, hrea_checkout):
        """economicResource has no resolver files and contributes nothing."""
        generate(hrea_checkout)

        text = (hrea_checkout / "docs" / "reference" / "observation.md").read_text(encoding="utf-8")

        assert "### `EconomicResource`" in text
        queries = text.split("## Queries\n\n")[1].split("## Mutations")[0]
        assert queries.count("### ") == 2
        assert "### `economicEvent`\nFind an economic event by ID\n> Status: Implemented" in queries
        assert "### `economicEvents`\n\n> Status: Unimplemented" in queries

        mutations = text.split("## Mutations\n\n")[1]
        assert "### `createEconomicEvent`\nCreate an economic event\n> Status: Implemented" in mutations
        assert "### `deleteEconomicEvent`\n\n> Status: Unimplemented" in mutations

    def test_variable_declared_resolver(self, hrea_checkout):
        """A shorthand entry is classified from its variable."""
        generate(hrea_checkout)

        text = (hrea_checkout / "docs" / "reference" / "measurement.md").read_text(encoding="utf-8")

        assert "# Measurement\n\n" in text
        assert "### `unit`\nFind a unit by ID\n> Status: Implemented" in text
        assert "### `createUnit`\n\n> Status: Implemented" in text

    def test_output_override(self, hrea_checkout, tmp_path):
        out = tmp_path / "elsewhere"

        assert generate(hrea_checkout, "--output", str(out)) == 0

        assert (out / "agent.md").exists()
        assert not (hrea_checkout / "docs").exists()

    def test_dry_run(self, hrea_checkout, capsys):
        assert generate(hrea_checkout, "--dry-run") == 0

        assert not (hrea_checkout / "docs").exists()
        assert "Dry run" in capsys.readouterr().out

    def test_verbose_lists_files(self, hrea_checkout, capsys):
        generate(hrea_checkout, "--verbose")

        out = capsys.readouterr().out
        assert "agent.ts: 1/3 implemented" in out
        assert "index.ts" not in out


class TestFailures:
    """Any malformed resolver file aborts the run."""

    def test_malformed_export_fails(self, hrea_checkout, write_file, capsys):
        write_file(hrea_checkout / "vf-graphql-holochain" / "queries" / "broken.ts", """
            export default () => {
              const resolvers = {}
              return resolvers
            }
        """)

        assert generate(hrea_checkout) == 1

        out = capsys.readouterr().out
        assert "broken.ts" in out
        assert "object literal" in out

    def test_unknown_class_fails(self, hrea_checkout, write_file):
        config = hrea_checkout / "hrea-docs.yaml"
        config.write_text(config.read_text() + "  plan: [plan]\n")

        assert generate(hrea_checkout) == 1

    def test_missing_resolver_folder_fails(self, hrea_checkout, capsys):
        config = hrea_checkout / "hrea-docs.yaml"
        config.write_text(config.read_text().replace("resolvers: vf-graphql-holochain", "resolvers: nowhere"))

        assert generate(hrea_checkout) == 1
        assert "Error" in capsys.readouterr().out


class TestStatus:
    def test_status_summary(self, hrea_checkout, capsys):
        code = main(["status", "--config", str(hrea_checkout / "hrea-docs.yaml")])

        out = capsys.readouterr().out
        assert code == 0
        assert "Total: 5/9 implemented" in out
        assert "- economicEvents" in out
        assert not (hrea_checkout / "docs").exists()


class TestCli:
    def test_no_command_shows_usage(self, capsys):
        assert main([]) == 0
        assert "Usage: hrea-docs" in capsys.readouterr().out

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as info:
            main(["--version"])
        assert info.value.code == 0
