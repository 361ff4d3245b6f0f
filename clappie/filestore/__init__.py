"""Directory-as-database storage of text files with metadata blocks, paths and file locks."""