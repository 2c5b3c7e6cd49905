class MMMError(Exception):
    pass


class InvalidCurveType(MMMError):
    pass


class InvalidCurveDelta(MMMError):
    pass


class InvalidLPFeeBP(MMMError):
    pass


class InvalidReferralBP(MMMError):
    pass


class NumericOverflow(MMMError):
    pass


class InvalidAllowLists(MMMError):
    pass


class InvalidMasterEdition(MMMError):
    pass


class AccountConstraintError(MMMError):
    """Account failed a structural check (owner, seeds, layout)."""


class AccountOwnedByWrongProgram(AccountConstraintError):
    pass


class ConstraintSeeds(AccountConstraintError):
    pass


class AccountDiscriminatorMismatch(AccountConstraintError):
    pass


class AccountDidNotDeserialize(AccountConstraintError):
    pass
