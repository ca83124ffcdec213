import logging
import typing


logger = logging.getLogger(__name__)

CallbackType = typing.Callable[..., typing.Any]


class EventEmitter:

	"""
	A simple synchronous event emitter for diagnostic listeners.

	Listener errors are logged and swallowed so that observing a generation
	can never change its result.
	"""

	def __init__ (self) -> None:

		"""
		Initialize an empty event registry.
		"""

		self._listeners: typing.Dict[str, typing.List[CallbackType]] = {}


	def on (self, event_name: str, callback: CallbackType) -> None:

		"""
		Register a callback for an event name.
		"""

		if event_name not in self._listeners:
			self._listeners[event_name] = []

		self._listeners[event_name].append(callback)

	def off (self, event_name: str, callback: CallbackType) -> None:

		"""
		Unregister a previously registered callback.

		Raises ``ValueError`` if the callback is not registered for the event.
		"""

		if event_name not in self._listeners or callback not in self._listeners[event_name]:
			raise ValueError(f"Callback not registered for event {event_name!r}")

		self._listeners[event_name].remove(callback)


	def has_listeners (self, event_name: str) -> bool:

		"""
		Return True if at least one callback is registered for the event.
		"""

		return bool(self._listeners.get(event_name))


	def emit (self, event_name: str, *args: typing.Any, **kwargs: typing.Any) -> None:

		"""
		Call every listener registered for an event.
		"""

		for callback in list(self._listeners.get(event_name, [])):

			try:
				callback(*args, **kwargs)

			except Exception:
				logger.exception(f"Listener for {event_name!r} raised")
