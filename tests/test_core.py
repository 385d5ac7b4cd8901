"""
Unit tests for core modules: change parsing, analysis strategies, pipeline,
diff parsing, PromptBuilder, Config, clean_commit_message.

Run with:
    pytest tests/test_core.py -v
"""

import json
import re

import pytest

from commit_gen.analysis import (
    AnalysisOptions,
    AnalysisPipeline,
    DirectorySummaryStrategy,
    FileListStrategy,
    TypeSummaryStrategy,
    describe_status,
    no_changes_message,
    summarize_diff,
)
from commit_gen.cli.utils import clean_commit_message
from commit_gen.config import Config, ConfigManager
from commit_gen.git import ChangeRecord, ChangeSet, GitError, StatusKind, parse_status, parse_diff, FileDiff
from commit_gen.prompts import PromptBuilder, PromptConfig


SAMPLE = ChangeSet.of(("M", "src/a.ts"), ("A", "src/b.ts"), ("??", "README.md"))


def _body(text: str) -> list[str]:
    """Report lines after the header, blank lines dropped."""
    return [line for line in text.split('\n') if line.strip()][1:]


# ---------------------------------------------------------------------------
# ChangeRecord / ChangeSet
# ---------------------------------------------------------------------------

class TestChangeRecord:

    @pytest.mark.parametrize("status, kind", [
        ("M", StatusKind.MODIFIED),
        ("A", StatusKind.ADDED),
        ("D", StatusKind.DELETED),
        ("R", StatusKind.RENAMED),
        ("??", StatusKind.UNTRACKED),
        ("MM", StatusKind.OTHER),
        ("UU", StatusKind.OTHER),
    ])
    def test_kind(self, status, kind):
        assert ChangeRecord(status=status, path="x.py").kind == kind

    def test_other_keeps_raw_code(self):
        record = ChangeRecord(status="AM", path="x.py")
        assert record.kind == StatusKind.OTHER
        assert record.status == "AM"

    @pytest.mark.parametrize("path, directory, basename", [
        ("src/a.ts", "src", "a.ts"),
        ("src/cli/main.py", "src/cli", "main.py"),
        ("README.md", ".", "README.md"),
        ("newdir/", ".", "newdir"),
    ])
    def test_directory_and_basename(self, path, directory, basename):
        record = ChangeRecord(status="M", path=path)
        assert record.directory == directory
        assert record.basename == basename

    def test_record_is_immutable(self):
        record = ChangeRecord(status="M", path="a.py")
        with pytest.raises(AttributeError):
            record.path = "b.py"

    def test_changeset_len_and_empty(self):
        assert len(SAMPLE) == 3
        assert not SAMPLE.is_empty
        assert ChangeSet().is_empty


# ---------------------------------------------------------------------------
# parse_status — porcelain output
# ---------------------------------------------------------------------------

class TestParseStatus:

    def test_parses_two_column_format(self):
        output = " M src/a.ts\nA  src/b.ts\n?? README.md\n"
        changes = parse_status(output)
        assert [(r.status, r.path) for r in changes] == [
            ("M", "src/a.ts"),
            ("A", "src/b.ts"),
            ("??", "README.md"),
        ]

    def test_drops_blank_lines(self):
        changes = parse_status("\n M a.py\n\n   \nD  b.py\n")
        assert len(changes) == 2

    def test_empty_output(self):
        assert parse_status("").is_empty

    def test_unknown_code_passes_through(self):
        changes = parse_status("MM src/app.py\n")
        record = changes.records[0]
        assert record.status == "MM"
        assert record.kind == StatusKind.OTHER

    def test_rename_keeps_remaining_text_as_path(self):
        changes = parse_status("R  old.py -> new.py\n")
        assert changes.records[0].path == "old.py -> new.py"

    def test_quoted_path_is_unquoted(self):
        changes = parse_status('?? "caf\\303\\251 x.txt"\n')
        assert changes.records[0].path == "café x.txt"

    def test_quoted_path_groups_by_real_directory(self):
        record = parse_status('?? "dir/\\303\\251.txt"\n').records[0]
        assert record.directory == "dir"
        assert record.basename == "é.txt"

    def test_quoted_rename_unquotes_both_sides(self):
        changes = parse_status('R  "old name.py" -> "new \\"q\\".py"\n')
        assert changes.records[0].path == 'old name.py -> new "q".py'

    def test_escaped_control_characters(self):
        changes = parse_status('A  "tab\\there.txt"\n')
        assert changes.records[0].path == "tab\there.txt"

    def test_preserves_order_and_duplicates(self):
        changes = parse_status(" M b.py\n M a.py\n M b.py\n")
        assert [r.path for r in changes] == ["b.py", "a.py", "b.py"]

    @pytest.mark.parametrize("line", ["M", "MMXfile.py", "M  ", "src/a.py"])
    def test_malformed_line_raises(self, line):
        with pytest.raises(GitError):
            parse_status(line + "\n")


# ---------------------------------------------------------------------------
# FileListStrategy
# ---------------------------------------------------------------------------

class TestFileListStrategy:

    def test_example_output(self):
        result = FileListStrategy().analyze(SAMPLE)
        assert result == (
            "Arquivos alterados:\n"
            "1. src/a.ts (modificado)\n"
            "2. src/b.ts (adicionado)\n"
            "3. README.md (não rastreado)\n"
        )

    def test_header_only_when_empty(self):
        assert FileListStrategy().analyze(ChangeSet()) == "Arquivos alterados:\n"

    def test_numbering_is_contiguous(self):
        changes = ChangeSet.of(*[("M", f"f{i}.py") for i in range(12)])
        lines = _body(FileListStrategy().analyze(changes))
        assert len(lines) == 12
        assert [int(line.split('.')[0]) for line in lines] == list(range(1, 13))

    def test_unmapped_status_renders_raw(self):
        result = FileListStrategy().analyze(ChangeSet.of(("UU", "conflict.py")))
        assert "1. conflict.py (UU)" in result

    def test_english_labels(self):
        result = FileListStrategy().analyze(SAMPLE, AnalysisOptions(language="en"))
        assert result.startswith("Changed files:\n")
        assert "3. README.md (untracked)" in result


# ---------------------------------------------------------------------------
# DirectorySummaryStrategy
# ---------------------------------------------------------------------------

class TestDirectorySummaryStrategy:

    def test_example_output(self):
        result = DirectorySummaryStrategy().analyze(SAMPLE)
        assert result == (
            "\nResumo por diretório:\n"
            "\nsrc/ (2 arquivo(s)):\n"
            "  - a.ts\n"
            "  - b.ts\n"
            "\nraiz/ (1 arquivo(s)):\n"
            "  - README.md\n"
        )

    def test_first_seen_directory_order(self):
        changes = ChangeSet.of(("M", "zeta/a.py"), ("M", "alpha/b.py"), ("M", "zeta/c.py"))
        result = DirectorySummaryStrategy().analyze(changes)
        assert result.index("zeta/") < result.index("alpha/")

    def test_counts_sum_to_total(self):
        changes = ChangeSet.of(
            ("M", "src/a.py"), ("A", "docs/x.md"), ("M", "src/b.py"), ("D", "top.txt"), ("M", "src/a.py"),
        )
        result = DirectorySummaryStrategy().analyze(changes)
        counts = [int(n) for n in re.findall(r'\((\d+) arquivo\(s\)\)', result)]
        assert sum(counts) == len(changes)

    def test_empty_changeset(self):
        assert DirectorySummaryStrategy().analyze(ChangeSet()) == "\nResumo por diretório:\n"

    def test_english_root_word(self):
        result = DirectorySummaryStrategy().analyze(SAMPLE, AnalysisOptions(language="en"))
        assert "\nroot/ (1 file(s)):\n" in result


# ---------------------------------------------------------------------------
# TypeSummaryStrategy
# ---------------------------------------------------------------------------

class TestTypeSummaryStrategy:

    def test_example_output(self):
        result = TypeSummaryStrategy().analyze(SAMPLE)
        assert result == (
            "\nTipos de alteração:\n"
            "- 1 file(s) modificado\n"
            "- 1 file(s) adicionado\n"
            "- 1 file(s) não rastreado\n"
        )

    def test_first_seen_status_order_and_counts(self):
        changes = ChangeSet.of(("D", "a"), ("M", "b"), ("D", "c"), ("M", "d"), ("D", "e"))
        lines = _body(TypeSummaryStrategy().analyze(changes))
        assert lines == ["- 3 file(s) deletado", "- 2 file(s) modificado"]

    def test_counts_sum_to_total(self):
        changes = ChangeSet.of(("M", "a"), ("MM", "b"), ("??", "c"), ("M", "d"))
        lines = _body(TypeSummaryStrategy().analyze(changes))
        assert sum(int(line.split()[1]) for line in lines) == len(changes)

    def test_empty_changeset(self):
        assert TypeSummaryStrategy().analyze(ChangeSet()) == "\nTipos de alteração:\n"


# ---------------------------------------------------------------------------
# AnalysisPipeline
# ---------------------------------------------------------------------------

class TestAnalysisPipeline:

    def test_runs_strategies_in_fixed_order(self):
        reports = AnalysisPipeline().reports(SAMPLE)
        assert [r.strategy for r in reports] == ["file_list", "directory_summary", "type_summary"]

    def test_build_concatenates_reports(self):
        pipeline = AnalysisPipeline()
        expected = (
            FileListStrategy().analyze(SAMPLE)
            + DirectorySummaryStrategy().analyze(SAMPLE)
            + TypeSummaryStrategy().analyze(SAMPLE)
        )
        assert pipeline.build(SAMPLE) == expected

    def test_idempotent(self):
        pipeline = AnalysisPipeline()
        assert pipeline.build(SAMPLE) == pipeline.build(SAMPLE)

    def test_empty_changeset_still_has_headers(self):
        result = AnalysisPipeline().build(ChangeSet())
        assert "Arquivos alterados:" in result
        assert "Resumo por diretório:" in result
        assert "Tipos de alteração:" in result

    def test_custom_strategy_list(self):
        pipeline = AnalysisPipeline(strategies=[TypeSummaryStrategy()])
        assert pipeline.build(SAMPLE) == TypeSummaryStrategy().analyze(SAMPLE)

    def test_input_not_mutated(self):
        before = SAMPLE.records
        AnalysisPipeline().build(SAMPLE)
        assert SAMPLE.records == before


class TestNoChangesMessage:

    def test_default(self):
        assert no_changes_message() == "feat: sem arquivos alterados"

    def test_custom_type_and_language(self):
        assert no_changes_message(AnalysisOptions(commit_type="fix", language="en")) == "fix: no changed files"


class TestDescribeStatus:

    def test_unknown_language_falls_back_to_default(self):
        assert describe_status("M", "xx") == "modificado"

    def test_unknown_code(self):
        assert describe_status("!!") == "!!"


# ---------------------------------------------------------------------------
# Diff parsing and offline summary
# ---------------------------------------------------------------------------

SAMPLE_DIFF = (
    "diff --git a/src/a.py b/src/a.py\n"
    "index 1234567..89abcde 100644\n"
    "--- a/src/a.py\n"
    "+++ b/src/a.py\n"
    "@@ -1,2 +1,3 @@\n"
    " context\n"
    "-old\n"
    "+new\n"
    "+added\n"
    "diff --git a/img.png b/img.png\n"
    "Binary files a/img.png and b/img.png differ\n"
    "diff --git a/docs/x.md b/docs/y.md\n"
    "--- a/docs/x.md\n"
    "+++ b/docs/y.md\n"
    "-gone\n"
)


class TestParseDiff:

    def test_counts_per_file(self):
        files = parse_diff(SAMPLE_DIFF)
        assert files == [
            FileDiff(path="src/a.py", additions=2, deletions=1),
            FileDiff(path="docs/y.md", additions=0, deletions=1),
        ]

    def test_empty_diff(self):
        assert parse_diff("") == []

    def test_mode_change_only_section_dropped(self):
        diff = (
            "diff --git a/run.sh b/run.sh\n"
            "old mode 100644\n"
            "new mode 100755\n"
        ) + SAMPLE_DIFF
        files = parse_diff(diff)
        assert [f.path for f in files] == ["src/a.py", "docs/y.md"]
        assert [f.total_changes for f in files] == [3, 1]


class TestSummarizeDiff:

    def test_single_file(self):
        files = [FileDiff(path="src/a.py", additions=2, deletions=1)]
        assert summarize_diff(files) == "feat: alterações em src/a.py (2 adições, 1 remoções)"

    def test_multiple_files_english(self):
        files = [FileDiff("a.py", 1, 0), FileDiff("b.py", 0, 2)]
        result = summarize_diff(files, AnalysisOptions(commit_type="fix", language="en"))
        assert result == "fix: changes in a.py (1 additions, 0 deletions); changes in b.py (0 additions, 2 deletions)"

    def test_nothing_to_summarize(self):
        assert summarize_diff([]) == ""


# ---------------------------------------------------------------------------
# PromptBuilder
# ---------------------------------------------------------------------------

class TestPromptBuilder:

    @pytest.fixture
    def builder(self):
        return PromptBuilder()

    def test_body_embedded_verbatim(self, builder):
        body = "diff --git a/x b/x\n+$(rm -rf /)\n+`whoami`"
        result = builder.build(body)
        assert f"<changes>\n{body}\n</changes>" in result

    def test_forced_type(self, builder):
        result = builder.build("body", PromptConfig(commit_type="fix"))
        assert "Use type 'fix'" in result

    def test_type_list_when_not_forced(self, builder):
        result = builder.build("body", PromptConfig(commit_type=None))
        assert "Choose the most appropriate type" in result
        assert "refactor:" in result

    def test_language_instruction(self, builder):
        assert "Brazilian Portuguese" in builder.build("body")
        assert "in English" in builder.build("body", PromptConfig(language="en"))

    def test_hint_included_when_provided(self, builder):
        result = builder.build("body", PromptConfig(hint="fixing the login bug"))
        assert "fixing the login bug" in result

    def test_hint_excluded_when_none(self, builder):
        assert "<context>" not in builder.build("body")


# ---------------------------------------------------------------------------
# Config
# ---------------------------------------------------------------------------

class TestConfig:

    def test_defaults(self):
        config = Config()
        assert config.provider == "auto"
        assert config.commit_type == "feat"
        assert config.language == "pt"
        assert config.command == "claude -p"

    def test_to_dict_excludes_none(self):
        d = Config().to_dict()
        assert "model" not in d
        assert "provider" in d

    def test_from_dict_ignores_unknown_keys(self):
        config = Config.from_dict({"provider": "command", "unknown_key": "value"})
        assert config.provider == "command"
        assert not hasattr(config, "unknown_key")

    @pytest.mark.parametrize("field, bad, default", [
        ("provider", "gpt4", "auto"),
        ("commit_type", "feature", "feat"),
        ("language", "fr", "pt"),
        ("command", "   ", "claude -p"),
    ])
    def test_validate_resets_invalid(self, field, bad, default):
        config = Config(**{field: bad})
        warnings = config.validate()
        assert len(warnings) == 1
        assert getattr(config, field) == default

    def test_validate_valid_config_no_warnings(self):
        assert Config().validate() == []

    def test_from_dict_triggers_validation(self, capsys):
        Config.from_dict({"language": "klingon"})
        err = capsys.readouterr().err
        assert "Config warning" in err


class TestConfigManager:

    def test_load_returns_defaults_when_no_file(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setattr("pathlib.Path.home", lambda: tmp_path / "fakehome")
        config = ConfigManager().load()
        assert config.provider == "auto"
        assert config.language == "pt"

    def test_load_reads_local_file(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / ".commitgenrc").write_text(json.dumps({"language": "en", "commit_type": "fix"}))

        manager = ConfigManager()
        config = manager.load()
        assert config.language == "en"
        assert config.commit_type == "fix"
        assert manager.get_config_path() == tmp_path / ".commitgenrc"

    def test_save_and_load_roundtrip(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setattr("pathlib.Path.home", lambda: tmp_path / "fakehome")

        ConfigManager().save(Config(provider="ollama", language="en"), global_config=False)
        loaded = ConfigManager().load()
        assert loaded.provider == "ollama"
        assert loaded.language == "en"

    @pytest.mark.parametrize("content", ["not valid json {{{", "[1, 2, 3]"])
    def test_malformed_file_returns_defaults(self, tmp_path, monkeypatch, capsys, content):
        monkeypatch.chdir(tmp_path)
        (tmp_path / ".commitgenrc").write_text(content)

        config = ConfigManager().load()
        assert config.provider == "auto"
        assert "Could not load" in capsys.readouterr().err


# ---------------------------------------------------------------------------
# clean_commit_message
# ---------------------------------------------------------------------------

class TestCleanCommitMessage:

    @pytest.mark.parametrize("raw, expected", [
        pytest.param(
            "Sure! Here's a commit message:\n\nfeat(cli): add verbose flag",
            "feat(cli): add verbose flag",
            id="strips-preamble",
        ),
        pytest.param(
            "```\nfix(api): handle timeout\n```",
            "fix(api): handle timeout",
            id="strips-backticks",
        ),
        pytest.param(
            "feat(auth): add login\n\n- add endpoint\n- validate creds",
            "feat(auth): add login\n\n- add endpoint\n- validate creds",
            id="preserves-body",
        ),
        pytest.param(
            "chore: bump version",
            "chore: bump version",
            id="subject-only",
        ),
    ])
    def test_clean_message(self, raw, expected):
        assert clean_commit_message(raw) == expected

    def test_strips_trailing_diff_block(self):
        raw = (
            "refactor(db): extract builder\n\n"
            "- new class\n\n"
            "diff --git a/foo.py b/foo.py\n"
            "+some code"
        )
        result = clean_commit_message(raw)
        assert "diff --git" not in result
        assert "- new class" in result

    def test_free_text_passes_through(self):
        assert clean_commit_message("  just some words  ") == "just some words"
