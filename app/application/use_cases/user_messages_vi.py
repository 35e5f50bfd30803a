"""Vietnamese user-facing messages for the affordability check."""


class UserMessagesVI:
    """Centralized Vietnamese user-facing messages."""

    PAST_PURCHASE_YEAR = "Năm mục tiêu không hợp lệ"

    @staticmethod
    def affordable_earlier(purchase_year: int, earliest_year: int) -> str:
        """Plan works and the house could be bought even sooner."""
        return (
            f"Chúc mừng, kế hoạch mua nhà năm {purchase_year} của bạn hoàn toàn khả thi. "
            f"Thậm chí bạn có thể mua sớm hơn nữa vào năm {earliest_year}"
        )

    @staticmethod
    def affordable_on_target(purchase_year: int) -> str:
        """Plan works exactly on the chosen year."""
        return f"Chúc mừng, kế hoạch mua nhà năm {purchase_year} của bạn hoàn toàn khả thi."

    @staticmethod
    def affordable_later(purchase_year: int, earliest_year: int) -> str:
        """Plan misses the chosen year but works later."""
        return (
            f"Kế hoạch mua nhà năm {purchase_year} của bạn tạm thời chưa thể thực hiện được. "
            f"Tuy nhiên, bạn có thể mua nhà sớm nhất vào năm {earliest_year}"
        )

    @staticmethod
    def not_affordable(purchase_year: int) -> str:
        """Nothing affordable within the simulated horizon."""
        return (
            f"Kế hoạch mua nhà năm {purchase_year} của bạn tạm thời chưa thể thực hiện được. "
            "Để có thể mua nhà, bạn sẽ cần rất nhiều thay đổi chiến lược đấy"
        )
