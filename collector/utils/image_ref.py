"""Helpers for container image reference strings (``registry/path/name:tag``)."""


def split_tag(image: str) -> tuple[str, str | None]:
    """Split an image reference into its repository part and its tag.

    Only a ``:`` after the last ``/`` separates a tag, so registry ports such
    as ``localhost:5000/core-data`` are kept in the repository part.
    """
    repository, sep, tag = image.rpartition(":")
    if not sep or "/" in tag:
        return image, None
    return repository, tag


def strip_tag(image: str) -> str:
    return split_tag(image)[0]


def with_arch_suffix(image: str, suffix: str) -> str:
    repository, tag = split_tag(image)
    if tag is None:
        return f"{repository}:latest{suffix}"
    return f"{repository}:{tag}{suffix}"


def replace_prefix(image: str, repo: str) -> str:
    if "/" in image:
        return f"{repo}/{image.rsplit('/', 1)[1]}"
    return f"{repo}/{image}"
