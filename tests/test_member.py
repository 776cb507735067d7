from libratrack.member import Member, MemberType


def make_member(expiry="2099-12-31", member_id="M001"):
    return Member(member_id, "Alice", "Smith", "alice@example.com", MemberType.STUDENT, expiry)


def test_can_borrow_true_when_under_limit():
    assert make_member("2030-01-01").can_borrow() is True


def test_can_borrow_false_at_limit():
    member = make_member("2030-01-01", "M002")
    for i in range(Member.MAX_LOANS):
        member.add_loan(f"L00{i}")
    assert member.can_borrow() is False


def test_can_borrow_false_when_inactive():
    member = make_member()
    member.active = False
    assert member.can_borrow() is False


def test_can_borrow_false_when_expired():
    assert make_member("2000-01-01").can_borrow() is False


def test_is_expired_false_for_future_date():
    assert make_member("2099-12-31").is_expired() is False


def test_is_expired_true_for_past_date():
    assert make_member("2000-01-01").is_expired() is True


def test_display_name_is_first_space_last():
    assert make_member().display_name() == "Alice Smith"


def test_membership_status_expired_for_past_date():
    assert make_member("2000-01-01").membership_status() == "Expired"


def test_membership_status_active_for_future_date():
    assert make_member("2099-12-31").membership_status() == "Active"


def test_membership_status_inactive():
    member = make_member()
    member.active = False
    assert member.membership_status() == "Inactive"


def test_add_loan_increments_active_loan_count():
    member = make_member("2030-01-01")
    assert member.active_loan_count == 0
    member.add_loan("L001")
    assert member.active_loan_count == 1
    member.add_loan("L002")
    assert member.active_loan_count == 2


def test_remove_loan_decrements_and_ignores_unknown():
    member = make_member()
    member.add_loan("L001")
    member.add_loan("L002")
    member.remove_loan("L001")
    member.remove_loan("L999")
    assert member.loan_ids == ["L002"]
    assert member.active_loan_count == 1


def test_has_overdue_loans_defaults_false():
    member = make_member()
    assert member.has_overdue_loans is False
    member.has_overdue_loans = True
    assert member.has_overdue_loans is True