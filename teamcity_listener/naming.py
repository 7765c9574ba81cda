"""Derivation of dotted test identifiers from story and class paths."""

STORIES_SEGMENT = "stories/"
STORY_EXTENSION = ".story"


def derive_container_id(path: str) -> str:
    """Turn a slash-delimited story or class path into a dotted identifier.

    Everything up to and including the first ``stories/`` segment is dropped,
    as is a trailing ``.story`` extension.
    """
    if STORIES_SEGMENT in path:
        path = path.partition(STORIES_SEGMENT)[2]
    path = path.removesuffix(STORY_EXTENSION)
    return path.replace(".", "_").replace("/", ".")


def derive_test_id(
    path: str, method_name: str, example_label: str | None = None
) -> str:
    """Derive the identifier of a test, or of one example iteration of it.

    >>> derive_test_id("stories/sprint-1/us-1/story.story", "passedScenario")
    'sprint-1.us-1.story.passedScenario'
    """
    test_id = f"{derive_container_id(path)}.{method_name.replace('.', '_')}"
    if example_label is not None:
        test_id = f"{test_id}.{example_label.replace('.', '_')}"
    return test_id
