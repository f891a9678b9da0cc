"""
Directory store: fixed catalog of offices and salespeople
"""
from typing import List, Optional, Dict, Any, Iterable
from config.seed_data import OFFICES, SALESPEOPLE
from src.models.office import Office, Salesperson
from src.utils.exceptions import ValidationError
from src.utils.logger import get_logger, log_execution_time

logger = get_logger(__name__)


class DirectoryStore:
    """
    Read-only catalog of offices and salespeople.

    Built once at startup. Salesperson order is the seed order and is the
    matching order used by find_available_salesperson. The availability flag
    is never changed after seeding: a matched salesperson stays available and
    ending a chat frees nobody.
    """

    def __init__(self, offices: Iterable[Office], salespeople: Iterable[Salesperson]):
        """
        Args:
            offices: offices in display order
            salespeople: salespeople in matching order

        Raises:
            ValidationError: duplicate ids or a salesperson pointing at an unknown office
        """
        self._offices: List[Office] = list(offices)
        self._salespeople: List[Salesperson] = list(salespeople)
        self._offices_by_id: Dict[str, Office] = {}

        for office in self._offices:
            if office.id in self._offices_by_id:
                raise ValidationError(f"duplicate office id: {office.id}", "offices")
            self._offices_by_id[office.id] = office

        seen_salespeople = set()
        for person in self._salespeople:
            if person.id in seen_salespeople:
                raise ValidationError(f"duplicate salesperson id: {person.id}", "salespeople")
            if person.office_id not in self._offices_by_id:
                raise ValidationError(
                    f"salesperson {person.id} references unknown office {person.office_id}",
                    "office_id"
                )
            seen_salespeople.add(person.id)

    @classmethod
    @log_execution_time()
    def from_seed(
        cls,
        offices: Optional[List[Dict[str, Any]]] = None,
        salespeople: Optional[List[Dict[str, Any]]] = None
    ) -> "DirectoryStore":
        """
        Build the store from literal seed dictionaries

        Args:
            offices: office seed (default: config.seed_data.OFFICES)
            salespeople: salesperson seed (default: config.seed_data.SALESPEOPLE)

        Returns:
            DirectoryStore instance
        """
        office_seed = OFFICES if offices is None else offices
        salesperson_seed = SALESPEOPLE if salespeople is None else salespeople
        store = cls(
            (Office(**item) for item in office_seed),
            (Salesperson(**item) for item in salesperson_seed),
        )
        logger.info(
            f"Directory store built: {len(store._offices)} offices, "
            f"{len(store._salespeople)} salespeople"
        )
        return store

    def list_offices(self) -> List[Office]:
        """All offices, as copies, in seed order"""
        return [office.model_copy(deep=True) for office in self._offices]

    def list_salespeople(self) -> List[Salesperson]:
        """All salespeople, as copies, in seed order"""
        return [person.model_copy() for person in self._salespeople]

    def get_office(self, office_id: str) -> Optional[Office]:
        """
        Look up an office

        Args:
            office_id: office identifier

        Returns:
            Office or None
        """
        office = self._offices_by_id.get(office_id)
        return office.model_copy(deep=True) if office else None

    def find_available_salesperson(self, office_id: str) -> Optional[Salesperson]:
        """
        First available salesperson at an office, in seed order

        Args:
            office_id: office identifier

        Returns:
            Salesperson copy or None when nobody is available
        """
        for person in self._salespeople:
            if person.office_id == office_id and person.available:
                return person.model_copy()
        return None
