from keyla.words import CachedDictionaryCatalog, FileDictionaryCatalog, WordSource


def test_file_catalog_scans_language_folders(dictionaries_dir):
    catalog = FileDictionaryCatalog(dictionaries_dir)
    names = [(s.language, s.name) for s in catalog.all_sources()]
    assert names == [
        ('english', 'alpha'),
        ('english', 'gamma'),
        ('english', 'numbers'),
        ('italian', 'broken'),
        ('italian', 'parole'),
    ]
    assert catalog.languages() == {
        'english': ['alpha', 'gamma', 'numbers'],
        'italian': ['broken', 'parole'],
    }


def test_lookup_by_name_and_language(dictionaries_dir):
    catalog = FileDictionaryCatalog(dictionaries_dir)
    parole = catalog.source_by_name('parole')
    assert parole.language == 'italian'
    assert parole.extension == '.json'
    assert catalog.source_by_language_and_name('italian', 'parole') == parole
    assert catalog.source_by_language_and_name('english', 'parole') is None
    assert catalog.source_by_name('missing') is None
    assert [s.name for s in catalog.sources_by_language('english')] == ['alpha', 'gamma', 'numbers']


def test_extension_filter(dictionaries_dir):
    catalog = FileDictionaryCatalog(dictionaries_dir, extensions=['txt'])
    assert {s.language for s in catalog.all_sources()} == {'english'}


def test_missing_base_dir_is_empty(tmp_path):
    catalog = FileDictionaryCatalog(tmp_path / 'nowhere')
    assert catalog.all_sources() == []
    assert catalog.languages() == {}
    assert catalog.sources_by_language('english') == []


def test_cached_catalog_is_a_snapshot(dictionaries_dir):
    catalog = CachedDictionaryCatalog(FileDictionaryCatalog(dictionaries_dir))
    (dictionaries_dir / 'english' / 'late.txt').write_text('late\n', encoding='utf-8')

    assert catalog.source_by_name('late') is None
    assert CachedDictionaryCatalog(FileDictionaryCatalog(dictionaries_dir)).source_by_name('late') is not None


def test_word_source_equality_ignores_language():
    assert WordSource('a', 'english', '/x/a.txt') == WordSource('a', 'italian', '/x/a.txt')
    assert WordSource('a', 'english', '/x/a.txt') != WordSource('a', 'english', '/y/a.txt')
