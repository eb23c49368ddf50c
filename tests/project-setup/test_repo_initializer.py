import subprocess

import pytest
from git import Repo

from create_filecoin_app.repo_initializer import INITIAL_COMMIT_MESSAGE, RepoInitializer


def _write(path, name, content="x\n"):
    target = path / name
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(content)


@pytest.mark.unit
class TestReinitialize:

    def test_creates_repository_with_single_init_commit(self, tmp_path):
        _write(tmp_path, "package.json", "{}\n")
        _write(tmp_path, "src/index.ts", "export {}\n")

        repo = RepoInitializer().reinitialize(str(tmp_path))

        commits = list(repo.iter_commits())
        assert len(commits) == 1
        assert commits[0].message == INITIAL_COMMIT_MESSAGE
        assert sorted(item.path for item in commits[0].tree.traverse() if item.type == "blob") == [
            "package.json", "src/index.ts",
        ]
        assert not repo.is_dirty(untracked_files=True)

    def test_replaces_inherited_history(self, tmp_path, template_repo):
        inherited = Repo(template_repo)
        assert len(list(inherited.iter_commits("--all"))) > 1

        repo = RepoInitializer().reinitialize(template_repo)

        assert len(list(repo.iter_commits("--all"))) == 1
        assert [head.name for head in repo.heads] == [repo.active_branch.name]

    def test_includes_dot_github_files(self, tmp_path):
        _write(tmp_path, ".github/workflows/ci.yml", "name: ci\n")

        repo = RepoInitializer().reinitialize(str(tmp_path))

        tracked = subprocess.run(
            ["git", "ls-files"], cwd=tmp_path, capture_output=True, text=True, check=True,
        ).stdout.split()
        assert tracked == [".github/workflows/ci.yml"]
        assert len(list(repo.iter_commits())) == 1
