"""Tests for glob pattern matching."""

from __future__ import annotations

from clipcat.file_resolver.patterns import is_recursive_pattern, matches, strip_curdir


def test_recursive_pattern_selection():
    assert is_recursive_pattern("**/*.go")
    assert is_recursive_pattern("*.{go,md}")
    assert not is_recursive_pattern("*.go")
    assert not is_recursive_pattern("src/*.go")


def test_simple_star_stays_within_one_segment():
    assert matches("*.go", "main.go")
    assert not matches("*.go", "pkg/main.go")
    assert matches("src/*.go", "src/main.go")
    assert not matches("src/*.go", "src/sub/main.go")


def test_question_mark_matches_one_non_separator_char():
    assert matches("?.txt", "a.txt")
    assert not matches("?.txt", "ab.txt")
    assert not matches("a?b", "a/b")


def test_doublestar_matches_zero_segments():
    assert matches("**/*.go", "main.go")
    assert matches("**/*.go", "a/b/main.go")
    assert not matches("**/*.go", "main.txt")


def test_doublestar_in_the_middle():
    assert matches("src/**/test.go", "src/test.go")
    assert matches("src/**/test.go", "src/a/b/test.go")
    assert not matches("src/**/test.go", "lib/a/test.go")
    assert matches("**/sub/**", "a/sub/b/c")


def test_trailing_doublestar_matches_directory_itself():
    assert matches("src/**", "src")
    assert matches("src/**", "src/a/b.txt")
    assert not matches("src/**", "srcx/a")


def test_doublestar_inside_segment_acts_like_star():
    assert matches("a**b", "axxb")
    assert not matches("a**b", "ax/xb")


def test_brace_alternation():
    assert matches("*.{go,md}", "x.md")
    assert matches("*.{go,md}", "x.go")
    assert not matches("*.{go,md}", "x.py")


def test_brace_with_doublestar_and_separators():
    assert matches("{src,lib}/**/*.py", "lib/a/b.py")
    assert matches("{src,lib}/**/*.py", "src/b.py")
    assert not matches("{src,lib}/**/*.py", "bin/b.py")
    assert matches("{docs/*.md,README.md}", "docs/guide.md")
    assert matches("{docs/*.md,README.md}", "README.md")


def test_nested_and_empty_brace_alternatives():
    assert matches("a{b,c{d,e}}", "ab")
    assert matches("a{b,c{d,e}}", "ace")
    assert not matches("a{b,c{d,e}}", "ac")
    assert matches("file{,.bak}", "file")
    assert matches("file{,.bak}", "file.bak")


def test_unbalanced_brace_is_literal():
    assert matches("{abc", "{abc")
    assert not matches("{abc", "abc")


def test_character_classes():
    assert matches("file[0-9].txt", "file7.txt")
    assert not matches("file[0-9].txt", "filex.txt")
    assert matches("[!a]*", "bcd")
    assert not matches("[!a]*", "abc")
    assert matches("[^a]*", "bcd")
    assert matches("[]]x", "]x")
    assert matches("[[:digit:]]x", "5x")
    assert not matches("[[:digit:]]x", "ax")


def test_negated_class_never_matches_separator():
    assert not matches("a[!b]c", "a/c")


def test_malformed_patterns_never_match():
    assert not matches("[abc", "a")
    assert not matches("[abc", "[abc")
    assert not matches("[z-a]", "m")
    assert not matches("abc\\", "abc")


def test_backslash_escapes_metacharacters():
    assert matches("\\*.txt", "*.txt")
    assert not matches("\\*.txt", "a.txt")


def test_case_sensitivity_toggle():
    assert not matches("*.LOG", "x.log")
    assert matches("*.LOG", "x.log", ignore_case=True)
    assert matches("*.LOG", "x.LOG")
    assert matches("*.LOG", "x.LOG", ignore_case=True)
    assert matches("**/*.{GO,MD}", "a/b.md", ignore_case=True)


def test_windows_separator():
    assert matches("**\\*.go", "a\\b\\main.go", sep="\\")
    assert not matches("*.go", "a\\main.go", sep="\\")


def test_strip_curdir():
    assert strip_curdir("./src/*.go", sep="/") == "src/*.go"
    assert strip_curdir("././*.go", sep="/") == "*.go"
    assert strip_curdir(".//build/", sep="/") == "build/"
    assert strip_curdir("./", sep="/") == ""
    assert strip_curdir(".hidden/*", sep="/") == ".hidden/*"
    assert strip_curdir("*.go", sep="/") == "*.go"
