"""Unit tests for docval.api.docs.validate and render_text."""

import json

import pytest

from docval.api.config.DocsConfig import DocsConfig
from docval.api.docs import LinkStatus, NotFoundError, render_text, validate


def test_broken_link_in_skill_index(write_corpus):
    root = write_corpus({"SKILL.md": "# Skill\n\n[foo](core/foo.md)\n"})
    report = validate(root)

    assert report.passed is False
    assert report.total_links == 1
    assert len(report.broken_links) == 1
    broken = report.broken_links[0]
    assert broken.reference.guide.rel_path == "SKILL.md"
    assert broken.reference.target == "core/foo.md"
    assert broken.reference.line_number == 3
    assert broken.status is LinkStatus.BROKEN_RELATIVE


def test_existing_link_in_skill_index(write_corpus):
    root = write_corpus({"SKILL.md": "[bar](core/bar.md)\n", "core/bar.md": "# Bar\n"})
    report = validate(root)

    assert report.passed is True
    assert report.broken_links == ()
    assert report.resolved_links == 1
    assert report.guides_checked == 2


@pytest.mark.parametrize("ignore_external", [False, True])
def test_external_links_never_broken(write_corpus, ignore_external):
    root = write_corpus({"SKILL.md": "[TestDino](https://testdino.com)\n"})
    report = validate(root, ignore_external=ignore_external)

    assert report.passed is True
    if ignore_external:
        assert (report.total_links, report.external_links, report.skipped_links) == (0, 0, 1)
    else:
        assert (report.total_links, report.external_links, report.skipped_links) == (1, 1, 0)


def test_example_code_links_are_not_checked(write_corpus):
    root = write_corpus({"ci.md": "```md\n[x](missing.md)\n```\nInline `[y](missing.md)` too\n"})
    report = validate(root, ignore_external=True)

    assert report.passed is True
    assert report.external_links == 2
    assert report.skipped_links == 0


def test_split_file_identifiers(write_corpus):
    root = write_corpus(
        {
            "SKILL.md": "[Locators](locators)\n[CI](ci.md)\n",
            "guides.md": "<!-- guide: locators -->\n# Locators\n<!-- guide: ci -->\n# CI\n[back](SKILL.md)\n[gone](nope.md)\n",
        }
    )
    report = validate(root)

    assert report.guides_checked == 3
    assert report.total_links == 4
    assert report.resolved_links == 3
    assert [(r.reference.guide.guide_id, r.reference.line_number) for r in report.broken_links] == [("guides.md#2", 6)]


def test_ignore_patterns_from_config(write_corpus):
    root = write_corpus({"SKILL.md": "[tpl]({{site}}/x.md)\n"})
    assert validate(root).passed is False
    assert validate(root, DocsConfig(ignore_patterns=[r"^\{\{"])).passed is True


def test_load_errors_do_not_fail_the_run(write_corpus):
    root = write_corpus({"bad.md": b"\xff\xfe broken", "ok.md": "[a](ok.md)\n"})
    report = validate(root)

    assert report.passed is True
    assert len(report.load_errors) == 1
    assert report.guides_checked == 1


def test_missing_root(tmp_path):
    with pytest.raises(NotFoundError):
        validate(tmp_path / "nowhere")


def _big_corpus(write_corpus):
    files = {"SKILL.md": "\n".join(f"- [g{i}](guides/g{i}.md)" for i in range(20)) + "\n"}
    for i in range(20):
        links = [f"[next](g{i + 1}.md)", "[home](../SKILL.md)", "[site](https://testdino.com)"]
        files[f"guides/g{i}.md"] = f"# Guide {i}\n" + "\n".join(links) + "\n"
    return write_corpus(files)


def test_repeated_runs_are_identical(write_corpus):
    root = _big_corpus(write_corpus)
    first, second = validate(root), validate(root)

    assert render_text(first) == render_text(second)
    assert json.dumps(first.to_dict()) == json.dumps(second.to_dict())


def test_worker_pool_matches_single_thread(write_corpus):
    root = _big_corpus(write_corpus)
    single = validate(root, workers=1)
    pooled = validate(root, workers=4)

    assert pooled.to_dict() == single.to_dict()
    assert single.broken_count == 1  # g19 links to g20, which does not exist


def test_render_text(write_corpus):
    root = write_corpus({"SKILL.md": "[foo](core/foo.md)\n[ok](SKILL.md)\n"})
    text = render_text(validate(root))

    assert text.startswith(f"Checked 2 links in 1 guides under {root.resolve()}\n")
    assert "  resolved:  1\n" in text
    assert "  broken:    1\n" in text
    assert "  SKILL.md:1: [foo](core/foo.md) broken (no such file)\n" in text
    assert text.endswith("FAILED\n")
    assert render_text(validate(root).to_dict()) == text
