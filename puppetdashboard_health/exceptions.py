EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_NODE_NOT_FOUND = 2
EXIT_DATE_PARSE = 3
EXIT_UNRECOGNIZED_STATUS = 4
EXIT_INVALID_RESPONSE = 5


class PuppetDashboardException(Exception):
    exit_code = EXIT_FAILURE


class ConfigurationError(PuppetDashboardException):
    pass


class FetchError(PuppetDashboardException):
    pass


class InvalidResponseError(PuppetDashboardException):
    exit_code = EXIT_INVALID_RESPONSE


class InvalidNodeRecordError(InvalidResponseError):
    pass


class DateParseError(PuppetDashboardException):
    exit_code = EXIT_DATE_PARSE


class NodeNotFoundError(PuppetDashboardException):
    exit_code = EXIT_NODE_NOT_FOUND

    def __init__(self, node_name):
        super().__init__(f"No node with name '{node_name}' found")
        self.node_name = node_name


class NotYetReportedError(PuppetDashboardException):
    exit_code = EXIT_FAILURE

    def __init__(self, node_name, field_name):
        super().__init__(f"Not reported yet ('{node_name}' has no {field_name})")
        self.node_name = node_name
        self.field_name = field_name


class UnrecognizedStatusError(PuppetDashboardException):
    exit_code = EXIT_UNRECOGNIZED_STATUS

    def __init__(self, node_name, status):
        super().__init__(f"node '{node_name}' has unrecognized status '{status}'")
        self.node_name = node_name
        self.status = status
