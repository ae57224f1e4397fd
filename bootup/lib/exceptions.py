class RequirementError(Exception):
	pass


class SysCallError(Exception):
	def __init__(self, message: str, exit_code: int | None = None, worker_log: bytes = b'') -> None:
		super().__init__(message)
		self.message = message
		self.exit_code = exit_code
		self.worker_log = worker_log


class ServiceException(Exception):
	pass


class UnknownServiceError(ServiceException):
	def __init__(self, service: str) -> None:
		super().__init__(f'service {service} is not supported')
		self.service = service
