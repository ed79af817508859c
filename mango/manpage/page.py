"""Man page skeleton shared by command and package pages."""
from __future__ import annotations

import datetime
from typing import Iterable, List, Optional, Set

from ..config import DATE_FORMAT, FIXED_SECTIONS, TRAILING_SECTIONS
from ..golang.doc import PackageDoc
from .escape import escape
from .extract import Paragraph, Prose, Section, sections, unstring
from .format import Formatter
from .words import refs, split_ref


def merge_sections(base: List[Section], overrides: List[Section]) -> List[Section]:
    """Replace or append sections given on the command line.

    An override with an empty name replaces the lead section.
    """
    out = [Section(s.name, list(s.paras)) for s in base]
    if not out or out[0].name != "":
        out.insert(0, Section(""))
    for o in overrides:
        for s in out:
            if s.name == o.name:
                s.paras = list(o.paras)
                break
        else:
            out.append(Section(o.name, list(o.paras)))
    return out


def prose_refs(paras: Iterable[Paragraph]) -> Iterable[str]:
    for p in paras:
        if isinstance(p, Prose):
            for s in p.sentences:
                yield from refs(s)


class ManPage(Formatter):
    """State and building blocks common to section 1 and section 3 pages.

    Subclasses set name and sec and implement render().
    """

    sec = ""
    default_manual = ""

    def __init__(
        self,
        pkg: PackageDoc,
        overrides: Optional[List[Section]] = None,
        name: str = "",
        version: str = "",
        manual: str = "",
        today: Optional[datetime.date] = None,
    ):
        super().__init__()
        self.pkg = pkg
        self.name = name
        self.date = (today or datetime.date.today()).strftime(DATE_FORMAT)
        self.version = version or pkg.value_of("Version") or self.date
        self.manual = manual or self.default_manual
        self.sections = merge_sections(sections(unstring(pkg.doc)), overrides or [])
        self.refs: Set[str] = set()
        self._done: Set[str] = set()

    @property
    def lead(self) -> Section:
        return self.sections[0]

    def render(self) -> str:
        raise NotImplementedError

    def output(self) -> str:
        """Render the page and return it, ending in a newline."""
        self.render()
        self.nl()
        return self.getvalue()

    # cross references

    def find_refs(self, extra: Iterable[str] = ()):
        """Collect man page references for SEE ALSO.

        References to the page itself are left out, so name and sec must
        be set first.
        """
        found = set(prose_refs(p for s in self.sections for p in s.paras))
        for doc in list(self.pkg.bugs) + list(extra):
            found.update(prose_refs(unstring(doc)))
        self.refs = found - {self.name + "(" + self.sec + ")"}

    # page parts

    def header(self):
        self.write('.TH "%s" %s "%s" "%s" "%s"\n' % (
            escape(self.name.upper()), self.sec, self.date,
            escape(self.version), escape(self.manual),
        ))

    def synopsis_line(self) -> str:
        """First sentence of the package comment, without its period."""
        for para in self.lead.paras:
            if isinstance(para, Prose) and para.sentences:
                s = " ".join(para.sentences[0].split())
                return s[:-1] if s.endswith(".") else s
            break
        return ""

    def do_name(self):
        self.section("NAME")
        line = escape(self.name)
        summary = self.synopsis_line()
        if summary:
            line += " \\- " + escape(summary)
        self.write(line + "\n")

    def description(self):
        if self.lead.paras:
            self.section("DESCRIPTION")
            self.paras(self.lead.paras)

    def user_section(self, s: Section):
        self._done.add(s.name)
        self.section(s.name)
        self.paras(s.paras)

    def user_sections(self, *names: str):
        """Emit the named user sections, in the order given, if present."""
        for name in names:
            for s in self.sections[1:]:
                if s.name == name and name not in self._done:
                    self.user_section(s)

    def remaining_user_sections(self):
        """Emit the user sections not yet written, in source order."""
        for s in self.sections[1:]:
            if s.name not in self._done and s.name not in TRAILING_SECTIONS:
                self.user_section(s)

    def fixed_user_sections(self):
        self.user_sections(*FIXED_SECTIONS)
        self.remaining_user_sections()

    def bugs(self):
        if not self.pkg.bugs:
            return
        self.section("BUGS")
        for i, bug in enumerate(self.pkg.bugs):
            if i != 0:
                self.pp()
            self.paras(unstring(bug))

    def see_also(self):
        if not self.refs:
            return
        self.section("SEE ALSO")
        names = sorted(self.refs)
        for i, ref in enumerate(names):
            name, sec = split_ref(ref)
            line = ".BR " + escape(name) + " " + escape(sec)
            if i != len(names) - 1:
                line += ","
            self.write(line + "\n")

    def endmatter(self):
        """Sections that follow SEE ALSO."""
        self.user_sections(*TRAILING_SECTIONS)
