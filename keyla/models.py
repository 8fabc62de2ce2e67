from keyla import db


class ProfileRow(db.Model):
    __tablename__ = 'profile'
    id = db.Column(db.String(36), primary_key=True)
    name = db.Column(db.String(128), nullable=False)
    email = db.Column(db.String(256), nullable=False, index=True)
    settings = db.Column(db.JSON, nullable=False, default=list)


class TypingTestRow(db.Model):
    __tablename__ = 'typing_test'
    id = db.Column(db.String(36), primary_key=True)
    profile_id = db.Column(db.String(36), nullable=False, index=True)
    language = db.Column(db.String(64), nullable=False, index=True)
    # Composed test definition: words, sources, modifier names
    document = db.Column(db.JSON, nullable=False)
    created_at = db.Column(db.DateTime(timezone=True), nullable=False)
    time_limit = db.Column(db.Integer, nullable=True)
    completed_at = db.Column(db.DateTime(timezone=True), nullable=True)
    accuracy = db.Column(db.Float, nullable=True)
    raw_accuracy = db.Column(db.Float, nullable=True)
    test_time = db.Column(db.Integer, nullable=True)
    error_count = db.Column(db.Integer, nullable=True)
    error_word_indices = db.Column(db.JSON, nullable=True)


class StatisticsRow(db.Model):
    __tablename__ = 'test_statistics'
    test_id = db.Column(db.String(64), primary_key=True)
    profile_id = db.Column(db.String(36), nullable=False, index=True)
    wpm = db.Column(db.Float, nullable=False)
    accuracy = db.Column(db.Float, nullable=False)
    errors = db.Column(db.JSON, nullable=False, default=list)
    timestamp = db.Column(db.BigInteger, nullable=False)
