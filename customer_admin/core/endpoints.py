"""REST endpoint paths of the backend API."""


class AuthEndpoints:
    LOGIN = "/api/auth/login"
    LOGOUT = "/api/auth/logout"


class CustomerEndpoints:
    LIST = "/api/home/admin-customer"
    USER_LIST = "/api/home/customer"
    CREATE = "/api/customer"
    CHECK_COMPANY_NAME = "/api/customer/check/company-name"

    @staticmethod
    def detail(customer_id: int) -> str:
        return f"/api/customer/{customer_id}"


class SalesmanEndpoints:
    LIST = "/api/home/admin-salesman"
    CREATE = "/api/salesman/register"

    @staticmethod
    def detail(salesman_id: int) -> str:
        return f"/api/salesman/{salesman_id}"


class EngineerEndpoints:
    LIST = "/api/home/admin-engineer"
    CREATE = "/api/engineer/register"

    @staticmethod
    def detail(engineer_id: int) -> str:
        return f"/api/engineer/{engineer_id}"


class FeasibilityStudyEndpoints:
    LIST = "/api/feasibility-studies"
    CREATE = "/api/feasibility-studies/register"

    @staticmethod
    def detail(study_id: str) -> str:
        return f"/api/feasibility-studies/{study_id}"

    @staticmethod
    def by_customer(customer_id: int) -> str:
        return f"/api/feasibility-studies/customer/{customer_id}"


class FileEndpoints:
    UPLOAD = "/api/file/upload"
    GENERATE_VIEW_URL = "/api/files/generateFileViewUrl"


SALES_REPS_TABLE = "sales_reps"
