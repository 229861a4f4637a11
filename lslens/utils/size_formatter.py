class SizeFormatter:
    """Format byte counts for listing output"""

    UNIT = 1024
    SUFFIXES = "KMGTPE"

    @classmethod
    def format_size(cls, size: int, human_readable: bool = True) -> str:
        """
        Format a size in bytes

        Args:
            size: Byte count
            human_readable: Use 1024-based units with one decimal (1.5K, 3.0M)

        Returns:
            The raw byte count as text, or the human-readable form
        """
        if not human_readable or size < cls.UNIT:
            return f"{size}"

        div, exp = cls.UNIT, 0
        n = size // cls.UNIT
        while n >= cls.UNIT and exp < len(cls.SUFFIXES) - 1:
            div *= cls.UNIT
            exp += 1
            n //= cls.UNIT
        return f"{size / div:.1f}{cls.SUFFIXES[exp]}"
