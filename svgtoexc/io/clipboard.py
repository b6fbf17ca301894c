#!/usr/bin/python3
#-*- coding:utf-8 -*-


__all__ = 'ClipboardError', 'clipboard_command', 'copy_to_clipboard'


import sys
import shutil
import subprocess
from logging import getLogger


logger = getLogger(__name__)


class ClipboardError(RuntimeError):
	pass


_commands = (
	('wl-copy',),
	('xclip', '-selection', 'clipboard'),
	('xsel', '--clipboard', '--input'),
)


def clipboard_command(platform=None):
	"Command line of the first available clipboard tool, or None."
	
	if (platform or sys.platform) == 'darwin':
		return ('pbcopy',) if shutil.which('pbcopy') else None
	
	for command in _commands:
		if shutil.which(command[0]):
			return command
	return None


def copy_to_clipboard(text):
	command = clipboard_command()
	if command is None:
		raise ClipboardError("No clipboard tool found (pbcopy, wl-copy, xclip or xsel).")
	
	logger.debug(f"Copying {len(text)} characters with {command[0]}")
	try:
		result = subprocess.run(command, input=text.encode('utf-8'), stdout=subprocess.DEVNULL, stderr=subprocess.PIPE)
	except OSError as error:
		raise ClipboardError(f"{command[0]} failed: {error}") from error
	
	if result.returncode != 0:
		output = result.stderr.decode('utf-8', 'replace').strip()
		raise ClipboardError(f"{command[0]} failed: {output}" if output else f"{command[0]} failed with a non-zero exit code.")
