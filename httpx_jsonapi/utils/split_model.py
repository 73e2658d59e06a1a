"""Resolve a model identifier into its resource type and URL path."""

from __future__ import annotations

from .case import Transform, identity


def split_model(
    model: str,
    *,
    resource_case: Transform = identity,
    pluralize: Transform = identity,
) -> tuple[str, str]:
    """Return ``(resource_type, resource_path)`` for a model identifier.

    Only the trailing segment is transformed: it is case converted first and
    then pluralised. The untransformed trailing segment is returned as the
    resource type so the document ``type`` can follow its own conventions.

    A trailing slash leaves an empty final segment which is transformed as
    is; keeping identifiers well formed is up to the caller.

    Examples:
        >>> split_model("posts/1/comments")
        ('comments', 'posts/1/comments')
        >>> split_model("libraryEntries", resource_case=kebab)
        ('libraryEntries', 'library-entries')
        >>> split_model("posts/1/comment", pluralize=pluralize)
        ('comment', 'posts/1/comments')
    """
    if not model:
        raise ValueError("Model identifier must not be empty.")
    segments = model.split("/")
    resource_type = segments.pop()
    segments.append(pluralize(resource_case(resource_type)))
    return resource_type, "/".join(segments)
