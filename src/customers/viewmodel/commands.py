"""UI commands bound to buttons and column headers of the customer grid."""

from __future__ import annotations
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from customers.viewmodel.customer_list import CustomerListViewModel


class ViewModelCommand:
    """Base for commands the view invokes; parameter is the bound argument."""

    def __init__(self, view_model: CustomerListViewModel):
        self.view_model = view_model

    def can_execute(self, parameter=None) -> bool:
        return True

    def execute(self, parameter=None):
        raise NotImplementedError


class SortListViewCommand(ViewModelCommand):
    """Parameter is the property name of the clicked column."""

    def can_execute(self, parameter=None) -> bool:
        return isinstance(parameter, str) and bool(parameter)

    def execute(self, parameter=None):
        self.view_model.sort_customers(parameter)


class RefreshCustomersCommand(ViewModelCommand):

    def execute(self, parameter=None):
        self.view_model.refresh_customers()


class DeleteCustomerCommand(ViewModelCommand):

    def execute(self, parameter=None):
        self.view_model.delete_selected_customer()


class GeneratePdfCommand(ViewModelCommand):

    def execute(self, parameter=None):
        self.view_model.generate_pdf()


class UpdateCustomerCommand(ViewModelCommand):

    def execute(self, parameter=None):
        self.view_model.update_customer()
