from dataclasses import dataclass, field
from enum import Enum


class HelpTextGroupId(Enum):
	GENERAL = 'General'
	NAVIGATION = 'Navigation'
	SELECTION = 'Selection'


@dataclass
class HelpText:
	description: str
	keys: list[str] = field(default_factory=list)


@dataclass
class HelpGroup:
	group_id: HelpTextGroupId
	group_entries: list[HelpText]

	def get_desc_width(self) -> int:
		return max([len(e.description) for e in self.group_entries])

	def get_key_width(self) -> int:
		return max([len(', '.join(e.keys)) for e in self.group_entries])


class Help:
	@staticmethod
	def general() -> HelpGroup:
		return HelpGroup(
			group_id=HelpTextGroupId.GENERAL,
			group_entries=[
				HelpText('Show help', ['?', 'h']),
				HelpText('Exit help', ['any key']),
				HelpText('Quit', ['q', 'Esc', 'Ctrl+c']),
			],
		)

	@staticmethod
	def navigation() -> HelpGroup:
		return HelpGroup(
			group_id=HelpTextGroupId.NAVIGATION,
			group_entries=[
				HelpText('Move up', ['k', '↑']),
				HelpText('Move down', ['j', '↓']),
				HelpText('Page up', ['PgUp', 'Ctrl+b']),
				HelpText('Page down', ['PgDown', 'Ctrl+f']),
				HelpText('First service', ['Home', 'g']),
				HelpText('Last service', ['End', 'G']),
				HelpText('Jump to service', ['1..9']),
			],
		)

	@staticmethod
	def selection() -> HelpGroup:
		return HelpGroup(
			group_id=HelpTextGroupId.SELECTION,
			group_entries=[
				HelpText('Install the selected service', ['Enter', 'Space']),
			],
		)

	@staticmethod
	def get_help_text() -> str:
		help_output = ''
		help_texts = [
			Help.general(),
			Help.navigation(),
			Help.selection(),
		]
		max_desc_width = max([help.get_desc_width() for help in help_texts]) + 2
		max_key_width = max([help.get_key_width() for help in help_texts])

		for help_group in help_texts:
			help_output += f'{help_group.group_id.value}\n'
			divider_len = max_desc_width + max_key_width
			help_output += '-' * divider_len + '\n'

			for entry in help_group.group_entries:
				help_output += entry.description.ljust(max_desc_width, ' ') + ', '.join(entry.keys) + '\n'

			help_output += '\n'

		return help_output
