from sqlalchemy.orm import Session

from app.repositories.product_repo import ProductRepository, StoreError
from app.schemas.product_schema import DuplicateOut, ImportResult
from app.services.csv_parser import parse_csv
from app.services.duplicate_resolver import find_existing_id
from app.services.normalizer import normalize_row
from app.utils.logger import get_logger
from app.utils.transactions import row_transaction

log = get_logger("inventory.import")


class ImportService:
    def __init__(self, db: Session):
        self.db = db
        self.repo = ProductRepository(db)

    def import_csv(self, text: str) -> ImportResult:
        """
        Import every data row of `text` independently, in file order.

        Rows without a name are skipped. Rows whose name already exists
        (ignoring case) are skipped and reported in `duplicates`. Every other
        row is inserted and committed on its own, so a failing row never
        undoes or stops the rows around it; insert failures only add to
        `skipped`. added + skipped == number of data rows.
        """
        parsed = parse_csv(text)
        result = ImportResult()

        for row_no, row in enumerate(parsed.rows, start=1):
            candidate = normalize_row(row)
            if candidate is None:
                result.skipped += 1
                continue

            existing_id = find_existing_id(self.repo, candidate.name)
            if existing_id:
                result.duplicates.append(
                    DuplicateOut(name=candidate.name, existing_id=existing_id)
                )
                result.skipped += 1
                continue

            # the unique name index turns a lost check-then-insert race into NameConflict
            try:
                with row_transaction(self.db):
                    self.repo.insert(candidate)
            except StoreError as e:
                log.warning("data row %d (%r) not inserted: %s", row_no, candidate.name, e)
                result.skipped += 1
                continue
            result.added += 1

        log.info(
            "import finished: rows=%d added=%d skipped=%d duplicates=%d",
            len(parsed.rows),
            result.added,
            result.skipped,
            len(result.duplicates),
        )
        return result
