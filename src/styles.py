from __future__ import annotations

"""
Class constants for the checklist page (Tailwind utility classes).

The page is a single purple column: keep inline class strings here so the
page module only composes them.
"""

C_PAGE = "min-h-screen w-full flex flex-col items-center bg-purple-700 text-white p-6 font-mono"
C_PAGE_TITLE = "text-4xl font-semibold tracking-tight mb-4"
C_FORM = "items-center gap-2 mb-4"
C_INPUT = "w-96 text-lg bg-white text-slate-900 border-4 border-dashed border-slate-300 px-4"
C_BTN_PRIM = "text-lg bg-green-600 text-white px-6 py-3"
C_LIST = "items-center justify-center gap-1"
C_TODO_ROW = "items-center gap-2"
C_TODO_TEXT = "cursor-pointer text-2xl p-1"
C_TODO_DONE = "line-through"
C_BTN_DELETE = "bg-transparent text-white text-xl"
C_MUTED = "text-sm text-purple-200"
C_ERROR = "text-lg text-rose-200"
