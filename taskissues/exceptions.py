class TaskIssuesError(Exception):
    def __str__(self):
        super_str = super(TaskIssuesError, self).__str__()
        if not super_str:
            return str(self.__class__.__name__)

        return super_str


class TaskListError(TaskIssuesError):
    pass


class InvalidSelection(TaskListError):
    pass


class UriOpenerFault(TaskIssuesError):
    def __init__(self, *args, **kwargs):
        self._uri = kwargs.pop("uri", None)
        self._provider = kwargs.pop("provider", None)

        super(UriOpenerFault, self).__init__(*args, **kwargs)

    @property
    def uri(self):
        return self._uri

    @property
    def provider(self):
        return self._provider
