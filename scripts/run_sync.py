"""
한 번의 동기화 사이클을 수동으로 실행하는 스크립트

Usage: python scripts/run_sync.py
"""

import sys
import os

sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from ledgerapi.containers import Container
from ledgerapi.database.connection import engine
from ledgerapi.logging_config import init_logging
from ledgerapi.models import Base


def run_sync():
    init_logging()
    Base.metadata.create_all(bind=engine)

    container = Container()
    coordinator = container.sync.sync_coordinator()
    try:
        result = coordinator.sync()
        print(result.model_dump_json(indent=2, by_alias=True))
    finally:
        container.sync.transaction_source().close()


if __name__ == "__main__":
    run_sync()
