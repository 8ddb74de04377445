from docpolicy.config.settings import Settings
from docpolicy.database.connection import close_pool, init_pool
from docpolicy.issuance.factory import IssuanceStoreFactory
from docpolicy.logging.logger import Log


def main() -> None:
    """Entry point: prepare the configured issuance store and report its counters."""
    settings = Settings()
    Log.configure(settings.log_level)
    use_postgres = settings.issuance_store.lower() == "postgres"
    if use_postgres:
        init_pool(settings)

    try:
        store = IssuanceStoreFactory.create(settings)
        if use_postgres:
            store.ensure_schema()  # type: ignore[attr-defined]
        records = store.snapshot()
        Log.info(f"Issuance store '{settings.issuance_store}' ready: {len(records)} series")
        for record in records:
            Log.info(f"{record.document_id}: {record.count} issued")
    finally:
        if use_postgres:
            close_pool()


if __name__ == "__main__":
    main()
