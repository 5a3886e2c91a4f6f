import csv
from pathlib import Path
from typing import Iterable, List, Optional, Protocol, Union


class DatasetRow(Protocol):
    sku: Optional[str]
    title: str
    album: str
    image_url: str
    item_url: str


def expected_header() -> List[str]:
    """CSV header order written by `DatasetWriter`."""
    return ["sku", "title", "album", "image_url", "item_url"]


class DatasetWriter:
    def __init__(self, csv_path: Union[str, Path]) -> None:
        self.csv_path = Path(csv_path)

    def ensure_dir(self) -> None:
        self.csv_path.parent.mkdir(parents=True, exist_ok=True)

    def write(self, items: Iterable[DatasetRow]) -> int:
        """Overwrite the dataset with `items` and return the number of rows.

        Every data field is quoted and embedded quotes are doubled, so commas,
        quotes and newlines in titles cannot break row boundaries.
        """
        self.ensure_dir()
        count = 0
        with self.csv_path.open("w", newline="", encoding="utf-8") as f:
            header = csv.writer(f, lineterminator="\n")
            header.writerow(expected_header())
            writer = csv.writer(f, quoting=csv.QUOTE_ALL, lineterminator="\n")
            for item in items:
                writer.writerow([
                    item.sku or "",
                    item.title,
                    item.album,
                    item.image_url,
                    item.item_url,
                ])
                count += 1
        return count
