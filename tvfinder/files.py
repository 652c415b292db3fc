"""File reading helpers and file-type heuristics based on extensions."""

from __future__ import annotations

import functools
import logging
import os
from dataclasses import dataclass, field
from pathlib import PurePath
from typing import IO, Any

from tvfinder.threads import default_num_threads

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReadResult:
    """Lines read from a stream, and whether the byte cap cut the read short."""

    lines: list[str] = field(default_factory=list)
    bytes_read: int = 0
    partial: bool = False

    @property
    def complete(self) -> bool:
        """True when the whole stream was read."""
        return not self.partial


def _line_to_text(line: bytes | str) -> tuple[str, int]:
    if isinstance(line, bytes):
        return line.decode("utf-8"), len(line)
    return line, len(line.encode("utf-8"))


def read_into_lines_capped(stream: IO[Any], max_bytes: int) -> ReadResult:
    """Read lines from ``stream`` until it ends or more than ``max_bytes`` were read.

    Trailing whitespace is stripped from every line. Read errors and
    invalid UTF-8 are raised to the caller.
    """
    lines: list[str] = []
    bytes_read = 0
    for raw in iter(stream.readline, raw_end := stream.read(0)):
        if bytes_read > max_bytes:
            break
        text, size = _line_to_text(raw)
        lines.append(text.rstrip())
        bytes_read += size
    del raw_end
    return ReadResult(
        lines=lines, bytes_read=bytes_read, partial=bytes_read > max_bytes
    )


@functools.lru_cache(maxsize=None)
def get_default_num_threads() -> int:
    """The default thread count, computed once per process."""
    return default_num_threads()


def get_file_size(path: str | os.PathLike[str]) -> int | None:
    """Size of the file at ``path`` in bytes, or None if it cannot be read."""
    try:
        return os.stat(path).st_size
    except OSError:
        return None


KNOWN_TEXT_FILE_EXTENSIONS: frozenset[str] = frozenset(
    """
    ada adb ads applescript as asc ascii ascx asm asmx asp aspx atom au3 awk
    bas bash bashrc bat bbcolors bcp bdsgroup bdsproj bib bowerrc c cbl cc cfc
    cfg cfm cfml cgi cjs clj cljs cls cmake cmd cnf cob code-snippets coffee
    coffeekup conf cp cpp cpt cpy crt cs csh cson csproj csr css csslintrc csv
    ctl curlrc cxx d dart dfm diff dof dpk dpr dproj dtd eco editorconfig ejs
    el elm emacs eml ent erb erl eslintignore eslintrc ex exs f f03 f77 f90
    f95 fish for fpp frm fs fsproj fsx ftn gemrc gemspec gitattributes
    gitconfig gitignore gitkeep gitmodules go gpp gradle graphql groovy
    groupproj grunit gtmpl gvimrc h haml hbs hgignore hh hpp hrl hs hta
    htaccess htc htm html htpasswd hxx iced iml inc inf info ini ino int irbrc
    itcl itermcolors itk jade java jhtm jhtml js jscsrc jshintignore jshintrc
    json json5 jsonld jsp jspx jsx ksh less lhs lisp log ls lsp lua m m4 mak
    map markdown master md mdown mdwn mdx metadata mht mhtml mjs mk mkd mkdn
    mkdown ml mli mm mxml nfm nfo noon npmignore npmrc nuspec nvmrc ops pas
    pasm patch pbxproj pch pem pg php php3 php4 php5 phpt phtml pir pl pm pmc
    pod pot prettierrc properties props pt pug purs py pyx r rake rb rbw rc
    rdoc rdoc_options resx rexx rhtml rjs rlib ron rs rss rst rtf rvmrc rxml s
    sass scala scm scss seestyle sh shtml sln sls spec sql sqlite sqlproj srt
    ss sss st strings sty styl stylus sub sublime-build sublime-commands
    sublime-completions sublime-keymap sublime-macro sublime-menu
    sublime-project sublime-settings sublime-workspace sv svc svg swift t tcl
    tcsh terminal tex text textile tg tk tmLanguage tmpl tmTheme toml tpl ts
    tsv tsx tt tt2 ttml twig txt v vb vbproj vbs vcproj vcxproj vh vhd vhdl
    vim viminfo vimrc vm vue webapp webmanifest wsc x-php xaml xht xhtml xml
    xs xsd xsl xslt y yaml yml zsh zshrc
    """.split()
)

# avif needs a native decoder and dds does not load reliably, so both are left out.
KNOWN_IMAGE_FILE_EXTENSIONS: frozenset[str] = frozenset(
    """
    bmp ff gif hdr ico jpeg jpg exr png pnm qoi tga tif webp
    """.split()
)


def _extension(path: str | os.PathLike[str]) -> str | None:
    suffix = PurePath(path).suffix
    if not suffix:
        return None
    return suffix[1:]


def is_known_text_extension(path: str | os.PathLike[str]) -> bool:
    """Whether ``path`` has an extension known to belong to text files."""
    ext = _extension(path)
    return ext is not None and ext in KNOWN_TEXT_FILE_EXTENSIONS


def is_accepted_image_extension(path: str | os.PathLike[str]) -> bool:
    """Whether ``path`` has an extension of a supported image format."""
    ext = _extension(path)
    return ext is not None and ext in KNOWN_IMAGE_FILE_EXTENSIONS