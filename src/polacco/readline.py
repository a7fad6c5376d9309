'''
Single line editor state: text, cursor, history and the visible window.

Knows nothing about keys or terminals. Hosts map their input events onto
the methods here, and draw what visible() or view() return. Nothing here
fails: out of range requests clamp, or do nothing.
'''

from collections import deque
from enum import Enum
import logging


logger = logging.getLogger(__name__)


class Mode(Enum):
    # Editing the live draft.
    EDITING = 'editing'
    # Looking at a history entry; the draft is cached aside.
    BROWSING = 'browsing'


class LineBuffer:
    '''
    Cursor addressed line of text, with bounded history.

    The cursor sits *between* characters, 0 being before the first and
    len(content) after the last. The viewport [offset_left, offset_right)
    is the slice of content shown; the cursor is always within
    [offset_left, offset_right] once recompute_viewport ran.
    Edits shrink the viewport to fit the content, but only
    recompute_viewport scrolls it to the cursor.
    '''

    DEFAULT_HISTORY_SIZE = 50

    def __init__(self, max_history_size=DEFAULT_HISTORY_SIZE):
        if max_history_size < 0:
            raise ValueError('cannot set negative history size')
        self.content = ''
        self.cursor = 0
        self.history = deque(maxlen=max_history_size)
        self.history_pointer = 0
        self.cached_draft = ''
        self.mode = Mode.EDITING
        self.offset_left = 0
        self.offset_right = 0

    @property
    def max_history_size(self):
        return self.history.maxlen

    @property
    def viewport(self):
        return self.offset_left, self.offset_right

    def __repr__(self):
        return '{}(content={!r}, cursor={})'.format(type(self).__name__,
                                                   self.content,
                                                   self.cursor)

    # Editing

    def _set_cursor(self, cursor):
        self.cursor = max(0, min(cursor, len(self.content)))

    def _edited(self):
        '''
        Make the current content the draft, and stop browsing.
        '''
        self.cached_draft = self.content
        self.history_pointer = len(self.history)
        self.mode = Mode.EDITING
        self._clamp_viewport()

    def _clamp_viewport(self):
        # Keep the stale window inside the new content until the next redraw.
        self.offset_right = min(self.offset_right, len(self.content))
        self.offset_left = min(self.offset_left, self.offset_right)

    def insert_text(self, text):
        '''
        Insert text at, and move the cursor past it.
        '''
        self.content = (self.content[:self.cursor] +
                        text +
                        self.content[self.cursor:])
        self._set_cursor(self.cursor + len(text))
        self._edited()

    def backspace(self):
        '''
        Delete the character before the cursor.
        '''
        if self.cursor > 0:
            self.content = (self.content[:self.cursor - 1] +
                            self.content[self.cursor:])
            self._set_cursor(self.cursor - 1)
        self._edited()

    def delete_forward(self):
        '''
        Delete the character under the cursor.
        '''
        if self.cursor < len(self.content):
            self.content = (self.content[:self.cursor] +
                            self.content[self.cursor + 1:])
        self._edited()

    def delete_to_start(self):
        '''
        Delete everything before the cursor.
        '''
        self.content = self.content[self.cursor:]
        self.cursor = 0
        self._edited()

    def delete_to_end(self):
        '''
        Delete everything from the cursor on.
        '''
        self.content = self.content[:self.cursor]
        self._edited()

    # Movement

    def move_cursor(self, n):
        '''
        Move cursor n characters right, or left if negative.
        '''
        self._set_cursor(self.cursor + n)

    def move_to_start(self):
        self.cursor = 0

    def move_to_end(self):
        self.cursor = len(self.content)

    # History

    def _load(self, text):
        self.content = text
        self.cursor = len(text)
        self._clamp_viewport()

    def history_prev(self):
        '''
        Show the previous history entry. Nothing older, nothing happens.
        '''
        if self.history_pointer <= 0:
            return
        if self.mode is Mode.EDITING:
            self.cached_draft = self.content
            self.mode = Mode.BROWSING
        self.history_pointer -= 1
        self._load(self.history[self.history_pointer])

    def history_next(self):
        '''
        Show the next history entry, or the draft past the newest one.
        '''
        if self.history_pointer >= len(self.history):
            return
        self.history_pointer += 1
        if self.history_pointer == len(self.history):
            self.mode = Mode.EDITING
            self._load(self.cached_draft)
        else:
            self._load(self.history[self.history_pointer])

    def _remember(self, line):
        if not line.strip():
            return
        if self.history and self.history[-1] == line:
            return
        # deque drops the oldest on its own once full
        self.history.append(line)

    def commit(self):
        '''
        Submit and clear the line; return what was submitted.

        Non blank lines go to history, unless they repeat the last entry.
        '''
        line = self.content
        self._remember(line)
        self.content = ''
        self.cursor = 0
        self.cached_draft = ''
        self.history_pointer = len(self.history)
        self.mode = Mode.EDITING
        self.offset_left = self.offset_right = 0
        logger.debug('committed %r', line)
        return line

    # Display

    def recompute_viewport(self, width):
        '''
        Scroll the viewport, at most width wide, just enough to show cursor.
        '''
        width = max(0, width)
        length = len(self.content)
        if length <= width:
            self.offset_left, self.offset_right = 0, length
            return self.viewport
        if width == 0:
            self.offset_left = self.offset_right = self.cursor
            return self.viewport
        left = self.offset_left
        if self.cursor < left:
            left = self.cursor
        elif self.cursor >= left + width:
            left = self.cursor + 1 - width
        # Content or width may have changed under a still window.
        right = min(left + width, length)
        left = max(0, right - width)
        self.offset_left, self.offset_right = left, right
        return self.viewport

    def visible(self, width):
        '''
        Return the visible text either side of the cursor, as a pair.
        '''
        left, right = self.recompute_viewport(width)
        return self.content[left:self.cursor], self.content[self.cursor:right]

    def view(self, width, marker='|'):
        '''
        Return the visible text, with marker where the cursor is.
        '''
        before, after = self.visible(width)
        return before + marker + after
