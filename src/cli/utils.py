"""Shared CLI utilities."""



def get_components():
    """Load config and build the CLI's storage objects for this invocation."""
    from cli.config import get_paths, load_config_model
    from indexer import FileIndex
    from knowledge import KnowledgeFileStore

    config_model = load_config_model()
    paths = get_paths(config_model)

    return {
        "config_model": config_model,
        "paths": paths,
        "file_index": FileIndex(paths["index_file"]),
        "knowledge": KnowledgeFileStore(paths["knowledge_dir"]),
    }


def split_csv(value: str | None) -> list[str]:
    """Split a comma-separated option value, dropping blanks."""
    if not value:
        return []
    return [v.strip() for v in value.split(",") if v.strip()]
