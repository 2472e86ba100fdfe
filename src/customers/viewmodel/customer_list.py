"""
Customer list view-model.

Holds the grid state (records, filter, sort, selection) and turns user
actions into calls on CustomerService and PdfService. Dialogs go through an
injected AbstractDialogService so the view-model stays toolkit-agnostic.
"""
import logging
from pathlib import Path
from typing import Optional

import config
from customers.adapters.pdf import PdfGenerationError, default_pdf_filename
from customers.domain.domain import Customer
from customers.domain.search import SearchCriteria, matches, next_sort
from customers.service_layer.handlers import CustomerNotFound
from customers.service_layer.services import CustomerService, PdfService
from customers.viewmodel.commands import (
    SortListViewCommand,
    RefreshCustomersCommand,
    DeleteCustomerCommand,
    GeneratePdfCommand,
    UpdateCustomerCommand,
)
from customers.viewmodel.dialogs import AbstractDialogService, PDF_FILE_TYPES
from customers.viewmodel.observable import ObservableObject, ObservableCollection, CollectionView

logger = logging.getLogger(__name__)

STATE_NO_DATA = "Nie wybrano danych"
TITLE_NO_DATA = "Nie wybrano danych"
TITLE_CONFIRM_DELETE = "Potwierdzenie usunięcia"
TITLE_ERROR = "Błąd"
MESSAGE_CONFIRM_DELETE = "Czy na pewno chcesz usunąć zmarłego: {full_name} z bazy danych?"
MESSAGE_SELECT_FOR_PDF = "Proszę wybrać dane zmarłego aby móc wygenerować plik PDF"
MESSAGE_SELECT_FOR_UPDATE = "Proszę wybrać dane zmarłego aby móc dokonać w nich zmian."
MESSAGE_SELECT_FOR_DELETE = "Proszę wybrać dane zmarłego aby móc je usunąć."
MESSAGE_MISSING_RECORD = "Wybrane dane nie istnieją już w bazie danych."
MESSAGE_PDF_FAILED = "Nie udało się wygenerować pliku PDF: {error}"


class CustomerListViewModel(ObservableObject):

    def __init__(
        self,
        customer_service: CustomerService,
        pdf_service: PdfService,
        dialog_service: AbstractDialogService,
        documents_dir: Optional[Path] = None,
    ):
        super().__init__()
        self._customer_service = customer_service
        self._pdf_service = pdf_service
        self._dialogs = dialog_service
        self.documents_dir = documents_dir or config.get_documents_dir()

        self._customer_filter = ""
        self._search_criteria = SearchCriteria.NAME_AND_SURNAME
        self._selected_customer: Optional[Customer] = None
        self._selected_customer_state = STATE_NO_DATA

        self.sort_list_view_command = SortListViewCommand(self)
        self.refresh_customers_command = RefreshCustomersCommand(self)
        self.delete_customer_command = DeleteCustomerCommand(self)
        self.generate_pdf_command = GeneratePdfCommand(self)
        self.update_customer_command = UpdateCustomerCommand(self)

        self.customers = ObservableCollection(self._customer_service.find_all())
        self.collection_view = CollectionView(self.customers, filter=self.filter_customers)

    # ---------- Bound properties ----------

    @property
    def customer_filter(self) -> str:
        return self._customer_filter

    @customer_filter.setter
    def customer_filter(self, value: str):
        self._customer_filter = value or ""
        self.on_property_changed("customer_filter")

    @property
    def search_criteria(self) -> SearchCriteria:
        return self._search_criteria

    @search_criteria.setter
    def search_criteria(self, value: SearchCriteria):
        self._search_criteria = value
        self.on_property_changed("search_criteria")

    @property
    def selected_customer(self) -> Optional[Customer]:
        return self._selected_customer

    @selected_customer.setter
    def selected_customer(self, value: Optional[Customer]):
        self._selected_customer = value
        if value is None or value.is_empty:
            self.selected_customer_state = STATE_NO_DATA
        else:
            self.selected_customer_state = value.full_name
        self.on_property_changed("selected_customer")

    @property
    def selected_customer_state(self) -> str:
        return self._selected_customer_state

    @selected_customer_state.setter
    def selected_customer_state(self, value: str):
        self._selected_customer_state = value
        self.on_property_changed("selected_customer_state")

    @property
    def has_selection(self) -> bool:
        return self._selected_customer is not None and not self._selected_customer.is_empty

    # ---------- Grid ----------

    def filter_customers(self, item) -> bool:
        if not isinstance(item, Customer):
            return False
        return matches(item, self._customer_filter, self._search_criteria)

    def sort_customers(self, column_name: str) -> None:
        current = self.collection_view.sort_descriptions[0] if self.collection_view.sort_descriptions else None
        new_sort = next_sort(current, column_name)
        logger.debug(f"Sorting customers by {new_sort.property_name} {new_sort.direction.value}")
        self.collection_view.sort_by(new_sort)

    def refresh_customers(self) -> None:
        self.collection_view.refresh()

    def reload_customers(self) -> None:
        self.customers.reset(self._customer_service.find_all())
        logger.info(f"Reloaded {len(self.customers)} customers")

    # ---------- Actions on the selected record ----------

    def delete_selected_customer(self) -> None:
        if not self.has_selection:
            self._dialogs.inform(MESSAGE_SELECT_FOR_DELETE, TITLE_NO_DATA)
            return

        customer = self._selected_customer
        confirmed = self._dialogs.confirm(
            MESSAGE_CONFIRM_DELETE.format(full_name=customer.full_name),
            TITLE_CONFIRM_DELETE,
        )
        if not confirmed:
            return

        try:
            self._customer_service.delete_customer(customer.id)
        except CustomerNotFound:
            logger.warning(f"Customer {customer.id} was already removed")
            self._dialogs.inform(MESSAGE_MISSING_RECORD, TITLE_ERROR)

        self.reload_customers()
        self.selected_customer = Customer.empty()
        self.selected_customer_state = STATE_NO_DATA

    def generate_pdf(self) -> Optional[str]:
        if not self.has_selection:
            self._dialogs.inform(MESSAGE_SELECT_FOR_PDF, TITLE_NO_DATA)
            return None

        customer = self._selected_customer
        path = self._dialogs.ask_save_path(
            default_pdf_filename(customer),
            str(self.documents_dir),
            PDF_FILE_TYPES,
        )
        if not path:
            return None

        try:
            return self._pdf_service.generate_pdf(customer, path)
        except PdfGenerationError as e:
            logger.error(f"Certificate export for customer {customer.id} failed: {e}")
            self._dialogs.inform(MESSAGE_PDF_FAILED.format(error=e), TITLE_ERROR)
            return None

    def update_customer(self) -> None:
        if not self.has_selection:
            self._dialogs.inform(MESSAGE_SELECT_FOR_UPDATE, TITLE_NO_DATA)
            return

        customer = self._selected_customer
        try:
            self._customer_service.update_customer(customer)
        except CustomerNotFound:
            logger.warning(f"Customer {customer.id} no longer exists, reloading")
            self._dialogs.inform(MESSAGE_MISSING_RECORD, TITLE_ERROR)
            self.reload_customers()
            return

        self.refresh_customers()
