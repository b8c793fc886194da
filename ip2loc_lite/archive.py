import logging
import zipfile
from typing import TYPE_CHECKING, Sequence

from ip2loc_lite.exceptions import ArchiveMissingError
from ip2loc_lite.types.archive import Archive
from ip2loc_lite.utils.database_names import database_to_csv_name

if TYPE_CHECKING:
    import pandas as pd

logger = logging.getLogger(__name__)


def read_archive_csv(
    archive: Archive, columns: Sequence[str] | None = None
) -> "pd.DataFrame":
    """Read the database CSV out of a downloaded archive.

    IP2Location LITE CSV files have no header row, so ``columns`` names them
    when given.
    """

    import pandas as pd

    if not archive.exists:
        raise ArchiveMissingError(archive.path)

    csv_name = database_to_csv_name(archive.database)
    with zipfile.ZipFile(archive.path) as zf:
        if csv_name not in zf.namelist():
            raise ArchiveMissingError(
                archive.path, f"'{csv_name}' not found in archive {archive.path}"
            )

        logger.debug(f"Reading {csv_name} from {archive.path}")
        with zf.open(csv_name) as csv_file:
            return pd.read_csv(
                csv_file,
                header=None,
                names=list(columns) if columns else None,
                dtype=str,
                keep_default_na=False,
            )
