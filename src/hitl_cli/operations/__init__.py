"""Operations on installed tools: updates, installation and contributions."""
