from dialectcss.dictionary.aliases import AliasDictionary, AliasTable, default_dictionary

__all__ = ["AliasDictionary", "AliasTable", "default_dictionary"]
