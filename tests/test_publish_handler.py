"""End-to-end tests of the publish sequence against a fake git."""

from __future__ import annotations

import json
import zipfile
from pathlib import Path

from rich.console import Console

from core.exceptions import CommandError, FileReadError, PublishAborted
from core.operation_results import PublishOutcome, PublishStep
from handlers.publish_handler import handle_publish
from models.config import PublisherConfig
from tests.helpers import FakeGit, ScriptedPrompter, make_components, wallpaper_answers

BASE = "https://raw.githubusercontent.com/octo/themes/main/"


def run_publish(
    config: PublisherConfig,
    console: Console,
    git: FakeGit,
    responses: list[object],
):
    prompter = ScriptedPrompter(responses)
    summary = handle_publish(config, make_components(config, prompter, git, console))
    return summary, prompter


def test_clean_repository_publish(
    config: PublisherConfig, console: Console, preview_image: Path, theme_source: Path, repo: Path
) -> None:
    git = FakeGit()

    summary, prompter = run_publish(
        config, console, git,
        [True, *wallpaper_answers(preview_image, theme_source)],
    )

    assert summary.outcome is PublishOutcome.COMPLETED
    assert summary.exit_code == 0
    assert not prompter.responses

    archive = repo / "wallpapers" / "aurora-blast" / "aurora-blast_1920x1080.zip"
    with zipfile.ZipFile(archive) as zf:
        assert "index.html" in zf.namelist()
    assert (repo / "previews" / "aurora-blast_preview.png").read_bytes() == preview_image.read_bytes()

    catalog = json.loads((repo / "update.json").read_text(encoding="utf-8"))
    theme = catalog["themes"][0]
    assert theme["id"] == "aurora-blast"
    assert theme["previewUrl"] == f"{BASE}previews/aurora-blast_preview.png"
    assert theme["resolutions"][0]["downloadUrl"] == (
        f"{BASE}wallpapers/aurora-blast/aurora-blast_1920x1080.zip"
    )
    assert theme["resolutions"][0]["version"] == 1

    assert git.names() == ["is_untracked", "status", "pull", "add", "commit", "push"]
    assert git.calls[4] == ("commit", "Publish Wallpaper: Aurora Blast - 1920x1080 (v1)")
    assert summary.download_url == theme["resolutions"][0]["downloadUrl"]


def test_republish_bumps_version_in_commit_message(
    config: PublisherConfig, console: Console, preview_image: Path, theme_source: Path
) -> None:
    script = [False, *wallpaper_answers(preview_image, theme_source)]
    run_publish(config, console, FakeGit(), list(script))
    git = FakeGit()

    summary, _ = run_publish(config, console, git, list(script))

    assert summary.merge is not None
    assert summary.merge.version == 2
    assert ("commit", "Publish Wallpaper: Aurora Blast - 1920x1080 (v2)") in git.calls
    assert "pull" not in git.names()


def test_declining_stash_aborts_without_writing(
    config: PublisherConfig, console: Console, repo: Path
) -> None:
    git = FakeGit(status_output=" M notes.txt")

    summary, _ = run_publish(config, console, git, [False])

    assert summary.outcome is PublishOutcome.ABORTED
    assert summary.exit_code == 1
    assert isinstance(summary.error, PublishAborted)
    assert "stash" not in git.names()
    assert sorted(p.name for p in repo.iterdir()) == [".gitignore"]


def test_stash_is_restored_after_success(
    config: PublisherConfig, console: Console, preview_image: Path, theme_source: Path
) -> None:
    git = FakeGit(status_output="?? scratch.txt")

    summary, _ = run_publish(
        config, console, git,
        [True, False, *wallpaper_answers(preview_image, theme_source)],
    )

    assert summary.outcome is PublishOutcome.COMPLETED
    assert summary.stashed is True
    assert summary.stash_restored is True
    assert git.names()[-1] == "stash_pop"
    assert git.names().index("stash") < git.names().index("commit")


def test_failure_still_restores_stash(
    config: PublisherConfig, console: Console, preview_image: Path, theme_source: Path
) -> None:
    git = FakeGit(status_output=" M notes.txt", fail_on=("push",))

    summary, _ = run_publish(
        config, console, git,
        [True, False, *wallpaper_answers(preview_image, theme_source)],
    )

    assert summary.outcome is PublishOutcome.FAILED
    assert summary.exit_code == 2
    assert isinstance(summary.error, CommandError)
    assert summary.step is PublishStep.COMMIT_AND_PUSH
    assert git.names()[-2:] == ["push", "stash_pop"]
    assert summary.stash_restored is True
    # Nothing is rolled back
    assert (config.repo_root / "update.json").exists()


def test_failed_stash_pop_is_a_warning(
    config: PublisherConfig, console: Console, preview_image: Path, theme_source: Path
) -> None:
    git = FakeGit(status_output=" M notes.txt", fail_on=("stash_pop",))

    summary, _ = run_publish(
        config, console, git,
        [True, False, *wallpaper_answers(preview_image, theme_source)],
    )

    assert summary.outcome is PublishOutcome.COMPLETED
    assert summary.stash_restored is False
    assert any("git stash pop" in w for w in summary.warnings)


def test_missing_ignore_file_is_created_and_committed(
    config: PublisherConfig, console: Console, preview_image: Path, theme_source: Path, repo: Path
) -> None:
    (repo / ".gitignore").unlink()
    git = FakeGit(untracked=(".gitignore",))

    summary, _ = run_publish(
        config, console, git,
        [True, False, *wallpaper_answers(preview_image, theme_source)],
    )

    assert (repo / ".gitignore").read_text(encoding="utf-8") == "logs/\n__pycache__/\n.venv/\n"
    assert summary.ignore_file_committed is True
    assert git.calls[:3] == [
        ("is_untracked", ".gitignore"),
        ("add", ".gitignore"),
        ("commit", "chore: Add .gitignore for tools"),
    ]
    assert summary.outcome is PublishOutcome.COMPLETED


def test_corrupt_catalog_is_replaced_with_warning(
    config: PublisherConfig, console: Console, preview_image: Path, theme_source: Path, repo: Path
) -> None:
    (repo / "update.json").write_text("{oops", encoding="utf-8")

    summary, _ = run_publish(
        config, console, FakeGit(),
        [False, *wallpaper_answers(preview_image, theme_source)],
    )

    assert summary.outcome is PublishOutcome.COMPLETED
    assert any("update.json is not valid" in w for w in summary.warnings)
    catalog = json.loads((repo / "update.json").read_text(encoding="utf-8"))
    assert [t["id"] for t in catalog["themes"]] == ["aurora-blast"]


def test_clock_goes_to_clock_layout(
    config: PublisherConfig, console: Console, tmp_path: Path, theme_source: Path, repo: Path
) -> None:
    preview = tmp_path / "retro.jpg"
    preview.write_bytes(b"jpeg")
    git = FakeGit()
    script = wallpaper_answers(preview, theme_source, theme_id="Retro Flip", resolution="Default")
    script[0] = "Clock"

    summary, _ = run_publish(config, console, git, [False, *script, True])

    assert summary.outcome is PublishOutcome.COMPLETED
    assert (repo / "clocks" / "retro-flip" / "retro-flip_Default.zip").is_file()
    assert (repo / "clock_previews" / "retro-flip_preview.jpg").is_file()
    catalog = json.loads((repo / "updateClock.json").read_text(encoding="utf-8"))
    assert catalog["clockThemes"][0]["isCustomizable"] is True
    assert not (repo / "update.json").exists()
    assert ("commit", "Publish Clock: Aurora Blast - Default (v1)") in git.calls


def test_archive_failure_stops_before_catalog(
    config: PublisherConfig, console: Console, preview_image: Path, theme_source: Path, repo: Path
) -> None:
    git = FakeGit()
    prompter = ScriptedPrompter([False, *wallpaper_answers(preview_image, theme_source)])
    components = make_components(config, prompter, git, console)

    def _failing_build(source: Path, destination: Path) -> float:
        raise FileReadError(str(source), "vanished")

    components.archive_builder.build = _failing_build  # type: ignore[method-assign]

    summary = handle_publish(config, components)

    assert summary.outcome is PublishOutcome.FAILED
    assert summary.step is PublishStep.BUILD_ARCHIVE
    assert isinstance(summary.error, FileReadError)
    assert not (repo / "update.json").exists()
    assert "commit" not in git.names()
