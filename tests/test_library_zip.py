"""Tests for reading Javadoc ZIP files."""

import zipfile

import pytest

from javadoc.class_info import ClassName
from javadoc.errors import ClassInfoFormatError, LibraryZipError
from javadoc.library_zip import LibraryZipFile
from tests.helpers import STRING_XML, class_xml, corrupt_entry, info_xml


# ============================================================================
# METADATA
# ============================================================================


def test_metadata_absent_without_info_file(make_zip) -> None:
    library = LibraryZipFile(make_zip({"a.b.C.xml": class_xml("a.b.C")}))

    assert library.name is None
    assert library.version is None
    assert library.base_url is None
    assert library.project_url is None


def test_metadata_read_from_info_file(make_zip) -> None:
    path = make_zip({
        "info.xml": info_xml(
            name="jsoup", version="1.8.1",
            baseUrl="http://jsoup.org/apidocs/", projectUrl="http://jsoup.org",
        ),
    })
    library = LibraryZipFile(path)

    assert library.name == "jsoup"
    assert library.version == "1.8.1"
    assert library.base_url == "http://jsoup.org/apidocs/"
    assert library.project_url == "http://jsoup.org"


def test_base_url_gets_trailing_slash(make_zip) -> None:
    library = LibraryZipFile(make_zip({"info.xml": info_xml(baseUrl="http://x")}))
    assert library.base_url == "http://x/"


def test_empty_attributes_are_absent(make_zip) -> None:
    library = LibraryZipFile(make_zip({"info.xml": info_xml(name="", baseUrl="", version="")}))

    assert library.name is None
    assert library.base_url is None
    assert library.version is None


def test_unexpected_info_root_element_is_tolerated(make_zip) -> None:
    library = LibraryZipFile(make_zip({"info.xml": '<library name="jsoup"/>'}))

    assert library.name is None
    assert library.base_url is None


def test_malformed_info_file_raises(make_zip) -> None:
    path = make_zip({"info.xml": "<info name='jsoup'"})

    with pytest.raises(LibraryZipError) as excinfo:
        LibraryZipFile(path)
    assert excinfo.value.__cause__ is not None


def test_missing_file_raises(tmp_path) -> None:
    with pytest.raises(LibraryZipError):
        LibraryZipFile(tmp_path / "missing.zip")


def test_missing_file_is_an_os_error(tmp_path) -> None:
    with pytest.raises(OSError):
        LibraryZipFile(tmp_path / "missing.zip")


def test_not_a_zip_file_raises(tmp_path) -> None:
    path = tmp_path / "bogus.zip"
    path.write_text("not a zip file")

    with pytest.raises(LibraryZipError):
        LibraryZipFile(path)


def test_damaged_info_file_raises(make_zip) -> None:
    path = make_zip(
        {"info.xml": info_xml(name="jsoup", version="1.8.1"), "a.B.xml": class_xml("a.B")},
        compression=zipfile.ZIP_DEFLATED,
    )
    corrupt_entry(path, "info.xml")

    with pytest.raises(LibraryZipError) as excinfo:
        LibraryZipFile(path)
    assert excinfo.value.__cause__ is not None


# ============================================================================
# URLS
# ============================================================================


def test_urls_with_trailing_slash_base(make_zip) -> None:
    library = LibraryZipFile(make_zip({"info.xml": info_xml(baseUrl="http://x/")}))

    assert library.frame_url("java.lang.String") == "http://x/index.html?java/lang/String.html"
    assert library.url("java.lang.String") == "http://x/java/lang/String.html"


def test_urls_with_normalized_base(make_zip) -> None:
    library = LibraryZipFile(make_zip({"info.xml": info_xml(baseUrl="http://x")}))

    assert library.frame_url(ClassName("a.B")) == "http://x/index.html?a/B.html"
    assert library.url(ClassName("a.B")) == "http://x/a/B.html"


def test_urls_absent_without_base_url(make_zip) -> None:
    library = LibraryZipFile(make_zip({"info.xml": info_xml(name="lib")}))

    assert library.frame_url("java.lang.String") is None
    assert library.url("java.lang.String") is None


def test_urls_accept_class_info(make_zip) -> None:
    library = LibraryZipFile(make_zip({
        "info.xml": info_xml(baseUrl="http://x/"),
        "java.lang.String.xml": STRING_XML,
    }))
    info = library.get_class_info("java.lang.String")

    assert library.url(info) == "http://x/java/lang/String.html"


# ============================================================================
# CLASS LISTING
# ============================================================================


def test_list_classes_skips_info_file(make_zip) -> None:
    library = LibraryZipFile(make_zip({
        "info.xml": info_xml(name="lib"),
        "a.b.C.xml": class_xml("a.b.C"),
        "d.E.xml": class_xml("d.E"),
    }))

    assert {c.full for c in library.list_classes()} == {"a.b.C", "d.E"}


def test_list_classes_skips_other_entries(make_zip) -> None:
    library = LibraryZipFile(make_zip({
        "a.B.xml": class_xml("a.B"),
        "README.txt": "hello",
        "nested/c.D.xml": class_xml("c.D"),
    }))

    assert library.class_names() == [ClassName("a.B")]


def test_list_classes_closes_when_exhausted(make_zip) -> None:
    library = LibraryZipFile(make_zip({"a.B.xml": class_xml("a.B")}))
    classes = library.list_classes()

    assert not classes.closed
    assert list(classes) == [ClassName("a.B")]
    assert classes.closed
    assert list(classes) == []


def test_list_classes_can_be_closed_early(make_zip) -> None:
    library = LibraryZipFile(make_zip({
        "a.B.xml": class_xml("a.B"),
        "c.D.xml": class_xml("c.D"),
    }))

    with library.list_classes() as classes:
        next(classes)
    assert classes.closed
    with pytest.raises(StopIteration):
        next(classes)


def test_list_classes_is_repeatable_with_fresh_calls(make_zip) -> None:
    library = LibraryZipFile(make_zip({"a.B.xml": class_xml("a.B")}))

    assert list(library.list_classes()) == list(library.list_classes())


def test_list_classes_raises_when_file_disappears(make_zip) -> None:
    path = make_zip({"a.B.xml": class_xml("a.B")})
    library = LibraryZipFile(path)
    path.unlink()

    with pytest.raises(LibraryZipError):
        library.list_classes()


# ============================================================================
# CLASS INFO
# ============================================================================


def test_get_class_info(make_zip) -> None:
    library = LibraryZipFile(make_zip({"java.lang.String.xml": STRING_XML}))
    info = library.get_class_info("java.lang.String")

    assert info.name == ClassName("java.lang.String")
    assert info.library is library
    assert len(info.methods) == 4


def test_get_class_info_missing_entry(make_zip) -> None:
    library = LibraryZipFile(make_zip({"a.B.xml": class_xml("a.B")}))

    assert library.get_class_info("a.C") is None
    assert library.get_class_info("info") is None


def test_get_class_info_malformed_entry(make_zip) -> None:
    library = LibraryZipFile(make_zip({"a.B.xml": "<class name='a.B'>"}))

    with pytest.raises(ClassInfoFormatError):
        library.get_class_info("a.B")


def test_get_class_info_wrong_root_element(make_zip) -> None:
    library = LibraryZipFile(make_zip({"a.B.xml": "<interface name='a.B'/>"}))

    with pytest.raises(LibraryZipError):
        library.get_class_info("a.B")


def test_get_class_info_damaged_entry(make_zip) -> None:
    path = make_zip({"a.B.xml": class_xml("a.B", "Some description")}, compression=zipfile.ZIP_DEFLATED)
    corrupt_entry(path, "a.B.xml")
    library = LibraryZipFile(path)

    assert library.class_names() == [ClassName("a.B")]
    with pytest.raises(LibraryZipError):
        library.get_class_info("a.B")


# ============================================================================
# IDENTITY
# ============================================================================


def test_equal_for_same_path(make_zip) -> None:
    path = make_zip({})
    a = LibraryZipFile(path)
    b = LibraryZipFile(path.parent / "." / path.name)

    assert a == b
    assert hash(a) == hash(b)
    assert a.path == path.resolve()


def test_not_equal_for_different_paths(make_zip) -> None:
    a = LibraryZipFile(make_zip({}, name="a.zip"))
    b = LibraryZipFile(make_zip({}, name="b.zip"))

    assert a != b
