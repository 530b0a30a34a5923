"""Source manifest schema.

A source manifest records which local source file was downloaded from which
remote URL. It is the durable record used to audit and reproduce a run:

    sources/
    └── card/
        ├── manifest.json         # SourceManifest
        └── {expansion_code}/
            └── {asset_name}.png
"""

from pydantic import Field, RootModel


class SourceManifest(RootModel[dict[str, str]]):
    """Ordered mapping of local relative file path to remote URL.

    Insertion order is preserved when serialized so that manifests from
    successive runs diff cleanly.
    """

    root: dict[str, str] = Field(default_factory=dict)

    def __contains__(self, path: str) -> bool:
        return path in self.root

    def __getitem__(self, path: str) -> str:
        return self.root[path]

    def __setitem__(self, path: str, url: str) -> None:
        self.root[path] = url

    def __len__(self) -> int:
        return len(self.root)

    def items(self):
        return self.root.items()
