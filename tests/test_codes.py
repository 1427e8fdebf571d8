import pytest

from ezatheme.codes import set_exa, set_ls
from ezatheme.lsc import Pair
from ezatheme.style import Colour, Fixed, Style
from ezatheme.ui_styles import FileKinds, Size, UiStyles


def _apply_ls(key_value: str) -> UiStyles:
    key, value = key_value.split("=")
    styles = UiStyles()
    assert set_ls(styles, Pair(key, value))
    return styles


def _apply_exa(key_value: str) -> UiStyles:
    key, value = key_value.split("=")
    styles = UiStyles()
    assert set_exa(styles, Pair(key, value))
    return styles


@pytest.mark.parametrize(
    "definition, getter, expected",
    [
        ("di=31", lambda c: c.filekinds.directory, Style(foreground=Colour.RED)),
        ("ex=32", lambda c: c.filekinds.executable, Style(foreground=Colour.GREEN)),
        ("fi=33", lambda c: c.filekinds.normal, Style(foreground=Colour.YELLOW)),
        ("pi=34", lambda c: c.filekinds.pipe, Style(foreground=Colour.BLUE)),
        ("so=35", lambda c: c.filekinds.socket, Style(foreground=Colour.PURPLE)),
        ("bd=36", lambda c: c.filekinds.block_device, Style(foreground=Colour.CYAN)),
        ("cd=35", lambda c: c.filekinds.char_device, Style(foreground=Colour.PURPLE)),
        ("ln=34", lambda c: c.filekinds.symlink, Style(foreground=Colour.BLUE)),
        ("or=33", lambda c: c.broken_symlink, Style(foreground=Colour.YELLOW)),
    ],
)
def test_ls_codes(definition, getter, expected):
    assert getter(_apply_ls(definition)) == expected


def test_ls_creates_default_group_keeping_other_fields():
    styles = _apply_ls("di=31")
    assert styles.filekinds.pipe == FileKinds().pipe
    assert styles.filekinds.socket == FileKinds().socket


def test_ls_unknown_key_changes_nothing():
    styles = UiStyles()
    assert set_ls(styles, Pair("uu", "38;5;117")) is False
    assert styles == UiStyles()


def test_exa_does_not_handle_ls_codes():
    styles = UiStyles()
    assert set_exa(styles, Pair("di", "31")) is False
    assert styles == UiStyles()


def test_unknown_key_rejected_by_both():
    styles = UiStyles()
    assert set_ls(styles, Pair("*.txt", "31")) is False
    assert set_exa(styles, Pair("*.txt", "31")) is False
    assert styles == UiStyles()


@pytest.mark.parametrize(
    "definition, getter, expected",
    [
        ("ur=38;5;100", lambda c: c.perms.user_read, Style(foreground=Fixed(100))),
        ("uw=38;5;101", lambda c: c.perms.user_write, Style(foreground=Fixed(101))),
        ("ux=38;5;102", lambda c: c.perms.user_execute_file, Style(foreground=Fixed(102))),
        ("ue=38;5;103", lambda c: c.perms.user_execute_other, Style(foreground=Fixed(103))),
        ("gr=38;5;104", lambda c: c.perms.group_read, Style(foreground=Fixed(104))),
        ("gw=38;5;105", lambda c: c.perms.group_write, Style(foreground=Fixed(105))),
        ("gx=38;5;106", lambda c: c.perms.group_execute, Style(foreground=Fixed(106))),
        ("tr=38;5;107", lambda c: c.perms.other_read, Style(foreground=Fixed(107))),
        ("tw=38;5;108", lambda c: c.perms.other_write, Style(foreground=Fixed(108))),
        ("tx=38;5;109", lambda c: c.perms.other_execute, Style(foreground=Fixed(109))),
        ("su=38;5;110", lambda c: c.perms.special_user_file, Style(foreground=Fixed(110))),
        ("sf=38;5;111", lambda c: c.perms.special_other, Style(foreground=Fixed(111))),
        ("xa=38;5;112", lambda c: c.perms.attribute, Style(foreground=Fixed(112))),
        ("nb=38;5;115", lambda c: c.size.number_byte, Style(foreground=Fixed(115))),
        ("nk=38;5;116", lambda c: c.size.number_kilo, Style(foreground=Fixed(116))),
        ("nm=38;5;117", lambda c: c.size.number_mega, Style(foreground=Fixed(117))),
        ("ng=38;5;118", lambda c: c.size.number_giga, Style(foreground=Fixed(118))),
        ("nt=38;5;119", lambda c: c.size.number_huge, Style(foreground=Fixed(119))),
        ("ub=38;5;115", lambda c: c.size.unit_byte, Style(foreground=Fixed(115))),
        ("uk=38;5;116", lambda c: c.size.unit_kilo, Style(foreground=Fixed(116))),
        ("um=38;5;117", lambda c: c.size.unit_mega, Style(foreground=Fixed(117))),
        ("ug=38;5;118", lambda c: c.size.unit_giga, Style(foreground=Fixed(118))),
        ("ut=38;5;119", lambda c: c.size.unit_huge, Style(foreground=Fixed(119))),
        ("df=38;5;115", lambda c: c.size.major, Style(foreground=Fixed(115))),
        ("ds=38;5;116", lambda c: c.size.minor, Style(foreground=Fixed(116))),
        ("uu=38;5;117", lambda c: c.users.user_you, Style(foreground=Fixed(117))),
        ("un=38;5;118", lambda c: c.users.user_other, Style(foreground=Fixed(118))),
        ("gu=38;5;119", lambda c: c.users.group_yours, Style(foreground=Fixed(119))),
        ("gn=38;5;120", lambda c: c.users.group_other, Style(foreground=Fixed(120))),
        ("lc=38;5;121", lambda c: c.links.normal, Style(foreground=Fixed(121))),
        ("lm=38;5;122", lambda c: c.links.multi_link_file, Style(foreground=Fixed(122))),
        ("ga=38;5;123", lambda c: c.git.new, Style(foreground=Fixed(123))),
        ("gm=38;5;124", lambda c: c.git.modified, Style(foreground=Fixed(124))),
        ("gd=38;5;125", lambda c: c.git.deleted, Style(foreground=Fixed(125))),
        ("gv=38;5;126", lambda c: c.git.renamed, Style(foreground=Fixed(126))),
        ("gt=38;5;127", lambda c: c.git.typechange, Style(foreground=Fixed(127))),
        ("gi=38;5;128", lambda c: c.git.ignored, Style(foreground=Fixed(128))),
        ("gc=38;5;129", lambda c: c.git.conflicted, Style(foreground=Fixed(129))),
        ("xx=38;5;128", lambda c: c.punctuation, Style(foreground=Fixed(128))),
        ("da=38;5;129", lambda c: c.date, Style(foreground=Fixed(129))),
        ("in=38;5;130", lambda c: c.inode, Style(foreground=Fixed(130))),
        ("bl=38;5;131", lambda c: c.blocks, Style(foreground=Fixed(131))),
        ("hd=38;5;132", lambda c: c.header, Style(foreground=Fixed(132))),
        ("lp=38;5;133", lambda c: c.symlink_path, Style(foreground=Fixed(133))),
        ("cc=38;5;134", lambda c: c.control_char, Style(foreground=Fixed(134))),
        ("oc=38;5;135", lambda c: c.octal, Style(foreground=Fixed(135))),
        ("ff=38;5;136", lambda c: c.flags, Style(foreground=Fixed(136))),
        ("bO=4", lambda c: c.broken_path_overlay, Style().underline()),
        ("mp=1;34;4", lambda c: c.filekinds.mount_point,
         Style(foreground=Colour.BLUE).bold().underline()),
        ("sp=1;35;4", lambda c: c.filekinds.special,
         Style(foreground=Colour.PURPLE).bold().underline()),
        ("im=38;5;128", lambda c: c.file_type.image, Style(foreground=Fixed(128))),
        ("vi=38;5;129", lambda c: c.file_type.video, Style(foreground=Fixed(129))),
        ("mu=38;5;130", lambda c: c.file_type.music, Style(foreground=Fixed(130))),
        ("lo=38;5;131", lambda c: c.file_type.lossless, Style(foreground=Fixed(131))),
        ("cr=38;5;132", lambda c: c.file_type.crypto, Style(foreground=Fixed(132))),
        ("do=38;5;133", lambda c: c.file_type.document, Style(foreground=Fixed(133))),
        ("co=38;5;134", lambda c: c.file_type.compressed, Style(foreground=Fixed(134))),
        ("tm=38;5;135", lambda c: c.file_type.temp, Style(foreground=Fixed(135))),
        ("cm=38;5;136", lambda c: c.file_type.compiled, Style(foreground=Fixed(136))),
        ("bu=38;5;137", lambda c: c.file_type.build, Style(foreground=Fixed(137))),
        ("sc=38;5;138", lambda c: c.file_type.source, Style(foreground=Fixed(138))),
        ("Sn=38;5;128", lambda c: c.security_context.none, Style(foreground=Fixed(128))),
        ("Su=38;5;129", lambda c: c.security_context.selinux.user,
         Style(foreground=Fixed(129))),
        ("Sr=38;5;130", lambda c: c.security_context.selinux.role,
         Style(foreground=Fixed(130))),
        ("St=38;5;131", lambda c: c.security_context.selinux.typ,
         Style(foreground=Fixed(131))),
        ("Sl=38;5;132", lambda c: c.security_context.selinux.range,
         Style(foreground=Fixed(132))),
    ],
)
def test_exa_codes(definition, getter, expected):
    assert getter(_apply_exa(definition)) == expected


def test_exa_sn_sets_every_number_style():
    styles = _apply_exa("sn=38;5;113")
    expected = Style(foreground=Fixed(113))
    size = styles.size
    assert [size.number_byte, size.number_kilo, size.number_mega,
            size.number_giga, size.number_huge] == [expected] * 5
    assert size.unit_byte is None


def test_exa_sb_sets_every_unit_style():
    styles = _apply_exa("sb=38;5;114")
    expected = Style(foreground=Fixed(114))
    size = styles.size
    assert [size.unit_byte, size.unit_kilo, size.unit_mega,
            size.unit_giga, size.unit_huge] == [expected] * 5
    assert size.number_byte is None


def test_exa_keeps_existing_group():
    styles = UiStyles(size=Size(major=Style(foreground=Colour.GREEN)))
    assert set_exa(styles, Pair("ds", "31"))
    assert styles.size.major == Style(foreground=Colour.GREEN)
    assert styles.size.minor == Style(foreground=Colour.RED)


def test_later_codes_overwrite_earlier():
    styles = UiStyles()
    for value in ("31", "32", "33"):
        assert set_ls(styles, Pair("pi", value))
    assert styles.filekinds.pipe == Style(foreground=Colour.YELLOW)