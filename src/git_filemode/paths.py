import pathlib

# repository structure


class NotGitRepositoryError(Exception):
    pass


git_root = ".git"


def find_repository_root(cur=None):
    cur = cur or pathlib.Path(".").resolve()
    path = cur / git_root
    if path.is_dir():
        return cur
    else:
        parent = cur.parent
        if parent == cur:
            raise NotGitRepositoryError("current directory is not a git repository")
        return find_repository_root(parent)


def find_git_root(cur=None):
    return find_repository_root(cur) / git_root


def find_config_file(cur=None):
    config_file = pathlib.Path("config")
    return find_git_root(cur) / config_file
