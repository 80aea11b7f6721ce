"""Error type raised by the use cases, and the message strings they share."""


class UseCaseError(Exception):
    """Raised when a use case rejects a request or a step of it fails."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


# Error strings
ERR_REFRESH_TOKEN = "refresh token is sinvalid  login again "
ERR_GET_DB = "error in retriving data from database"
ERR_WRITE_DB = "error in writing data to database"
ERR_UPDATE_DB = "error in updating data to database"
ERR_NEW_ACCESS = "error in creating new accesstoken"
ERR_SERVER = "internal server error"
ERR_OTP_VALIDATE = "failed to validate otp"
ERR_DATA_IS_NOT = "data is not"
ERR_ALPHABET = "data contains non-alphabetic characters"
ERR_USER_EXIST_FALSE = "user does not exist"
ERR_DB = "data base error"
ERR_PRODUCT_EXIST = "product does not exist"
ERR_USER_EXIST = "user does not exist"
ERR_PRODUCT_EXIST_TRUE = "product already exists in the database"
ERR_ID_EXIST = "id does not exist"
ERR_CART_FALSE = "no cart found"
ERR_DB_CONNECT = "database connection is nil"
ERR_DATATYPE_CONVERSION = "convertion of datatype is failed"
ERR_OFFER_EXIST_TRUE = "offer already exist"
ERR_GET_OFFER = "error in getting offers of"
ERR_GET_DATA = "error in getting data"
ERR_DATA_NEGATIVE = "data cannot be negative"
ERR_BLOCK_ALREADY = "already blocked"
ERR_UNBLOCK_ALREADY = "already unblocked"
ERR_FIELD_EMPTY = "field cannot be empty"
ERR_INVALID_TIME_PERIOD = "invalid time period, available options : week, month & year"
ERR_FORMAT = "enter the data in correct format"
ERR_INVALID_FORMAT = "invalid format"
ERR_INVALID_PRODUCT_ID = "invalid product id"
ERR_INVALID_ORDER_ID = "invalid order id"
ERR_DATA_ZERO = "data must be 1 or greater"
ERR_OUT_OF_STOCK = "out of stock"
ERR_LIMIT_EXCEEDS = "limit exceeds"
ERR_EMPTY_CART = "cart is empty"
ERR_CART_PRODUCT_EXIST = "product not available in cart"
ERR_EXIST_TRUE = "already exist"
ERR_INVALID_CATEGORY_ID = "invalid category id"
ERR_CATEGORY_EXIST_FALSE = "category does not exist"
ERR_INVALID_DATA = "invalid data"
ERR_OFFER_ADD = "error in adding offer"
ERR_NOT_EXIST = "does not exist"
ERR_USER_OWNED_ORDER = "the order is not done by this user"
ERR_CANCEL_ALREADY = "the order is already cancelled, so no point in cancelling"
ERR_RETURNED_ALREADY = "the order is already returned"
ERR_CANCEL_ALREADY_RETURN = "the order is cancelled,cannot return it"
ERR_DELIVERED_ALREADY_CANCEL = "the order is delivered cannot be cancelled"
ERR_DELIVERED_ALREADY = "the order is delivered, you can return it"
ERR_CANCEL_ALREADY_APPROVE = "the order is cancelled,cannot approve it"
ERR_PENDING_APPROVE = "the order is pending,cannot approve it"
ERR_DELIVERED_APPROVE = "the order is already deliverd"
ERR_PENDING_RETURN = "the order is pending,cannot return it"
ERR_PROCESSING_RETURN = "the order is processing cannot return it"
ERR_SHIPPED_RETURN = "the order is shipped cannot return it"
ERR_DELIVER_INVOICE = "wait for the invoice until the product is received"
ERR_INVALID_PHONE = "invalid phone number"
ERR_VERIFY = "error while verifying"
ERR_ALREADY_PAID = "already paid"
ERR_ALREADY_USER = "user already exist, sign in"
ERR_CONFIRMATION_MISMATCH = "password does not match"
ERR_HASHING = "error hashing password"
ERR_CREATE_REFERRAL = "referral creation failed"
ERR_CREATE_TOKEN = "could not create token"
ERR_INTERNAL = "internal error"
ERR_USER_BLOCK_TRUE = "user is blocked"
ERR_WRONG_CREDENTIALS = "password is incorrect"
ERR_INVALID_NAME = "invalid name"
ERR_INVALID_PIN = "invalid pin number"
ERR_INVALID_USER_ID = "invalid user id"
ERR_CHANGE_LOGIN = "password cannot change"
ERR_INVALID_DATE = "invalid date format or invalid date"
ERR_COUPON_EXIST_TRUE = "given cooupon already exist try another name"
ERR_COUPON_EXIST_FALSE = "given coupon is not available"
ERR_USER_ADMIN = "entered email is belongs to admin"
ERR_DATE_EXPIRED = "date expired"

STATUS_APPROVE = "approved"

# Message strings
DB_ERR = "Data base error"

MSG_CONSTRAINTS_ERR = "Constraints not satisfied"
MSG_AUTH_USER_ERR = "Cannot authenticate user"
MSG_FORMAT_ERR = "Details is not in correct format"
MSG_LOGIN_SUCCESS = "Logined successfully"
MSG_USER_BLOCK_ERR = "User could not be blocked"
MSG_USER_BLOCK_SUCCESS = "Successfully blocked the user"
MSG_USER_UNBLOCK_ERR = "User could not be unblocked"
MSG_USER_UNBLOCK_SUCCESS = "Successfully unblocked the user"
MSG_PAGE_NUM_FORMAT_ERR = "page number not in right format"
MSG_PAGE_COUNT_ERR = "page count not in right format"
MSG_GETTING_DATA_ERR = "could not retrieve Data"
MSG_GET_SUCCESS = "Successfully retrieved the Data"
MSG_EMPTY_DATE_ERR = "Start or End date is empty"
MSG_GET_ERR = "error in getting"
MSG_PRINT_ERR = "error in printing"
MSG_SERV_ERR = "Error in serving the sales report"
MSG_SUCCESS = "Success"
MSG_BAD_REQUEST_ERR = "bad request"
MSG_ADD_SUCCESS = "Successfully Added"
MSG_ADD_CART_ERR = "Cannot Add to Cart"
MSG_LIST_ERR = "Cannot list data"
MSG_LISTING_ERR = "Product cannot be displayed"
MSG_UPDATE_QUANTITY_ERR = "Cannot update quantity"
MSG_QUANTITY_UPDATION_FAIL_ERR = "Updating quantity Failed"
MSG_REMOVE_CART_ERR = "Removing from cart is Failed"
MSG_ADD_ERR = "Could not add"
MSG_UPDATE_ERR = "Could not update"
MSG_COUPON_EXPIRY_ERR = "Coupon cannot be made invalid"
MSG_OTP_SENT_ERR = "OTP not sent"
MSG_OTP_VERIFY_ERR = "Could not verify OTP"
MSG_OTP_SENT_SUCCESS = "OTP sent successfully"
MSG_OTP_VERIFY_SUCCESS = "Successfully verified OTP"
MSG_PAYMENT_ERR = "Cannot make payment"
MSG_ERR = "error"
MSG_UPDATE_SUCCESS = "Successfully Updated"
MSG_USER_ID_ERR = "user_id not found"
MSG_REQUIRED_USER_ID_ERR = "user_id is required"
MSG_INVALID_ID_ERR = "invalid user_id type"
MSG_ID_DATATYPE_ERR = "user_id must be an integer"
MSG_EDIT_ERR = "could not edit the data"
MSG_STOCK_UPDATE_ERR = "Could  not update the product stock"
MSG_CONV_ERR = "conversion error"
MSG_GET_ID_ERR = "Failed to get user id"
MSG_LOGIN_ERR = "user could not be logged in"
MSG_SIGNUP_ERR = "user could not signed up"
MSG_ID_ERR = "error in reading the order id"
MSG_CANCEL_ERR = "Couldn't cancel the order"
MSG_ORDER_APPROVE_ERR = "Couldn't approve the order"
MSG_ORDER_ERR = "Could not do the order"
MSG_CHECKOUT_ERR = "CheckOut Failed"
MSG_TOKEN_ERR = "Invalid Authorization Token error"
MSG_TOKEN_MISSING_ERR = "Missing authorization token"
MSG_UNAUTH_ERR = "Unauthorized access"
MSG_ID_GET_ERR = "Error retrieving ID"
MSG_COUPON_ADD_FAILED = "Adding coupon is failed "
MSG_EDIT_COUPON_FAILED = "Editing coupon is failed "
MSG_EDIT_COUPON_SUCCESS = "Editing coupon is Success "